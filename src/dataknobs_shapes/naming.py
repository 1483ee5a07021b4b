"""Key name rewriting for snake_case to camelCase normalization.

Only names containing separators (underscores, hyphens or whitespace) are
rewritten. Names without separators, such as ``firstName`` or ``ID``, are
already in their final form and pass through unchanged, so rewriting a
rewritten name never changes it again.
"""

import re
from typing import List

# separators: to split snake_case, kebab-case and spaced names by
#    x.split(text)
SEPARATOR_RE = re.compile(r"[_\-\s]+")


# camelcase LU: to split between consecutive lower and upper chars by
#    x.sub(r'\1 \2', text)
CAMELCASE_LU_RE = re.compile(r"([a-z0-9]+)([A-Z])")


# camelcase UL: to split between consecutive upper and upper lower chars by
#    x.sub(r'\1 \2', text)
CAMELCASE_UL_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")


def split_words(text: str) -> List[str]:
    """Split a name into words at separators and case changes."""
    words = []
    for segment in SEPARATOR_RE.split(text):
        segment = CAMELCASE_LU_RE.sub(r"\1 \2", segment)
        segment = CAMELCASE_UL_RE.sub(r"\1 \2", segment)
        words.extend(segment.split())
    return words


def camel_case(text: str) -> str:
    """Rewrite a snake_case (or kebab-case) name in camelCase.

    Examples:
        ``first_name`` -> ``firstName``, ``HTTP_status`` -> ``httpStatus``,
        ``__private_id__`` -> ``privateId``, ``firstName`` -> ``firstName``
    """
    if not SEPARATOR_RE.search(text):
        return text
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])
