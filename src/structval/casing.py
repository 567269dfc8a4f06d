"""Field name casing for path segments."""

import re
from enum import Enum

from slugify import slugify


class NameCase(str, Enum):
    """How record field names are rendered into path segments."""
    AS_DECLARED = "as_declared"
    SNAKE = "snake"
    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"


# Acronym runs stay together unless followed by a lowercase letter: "HTTPServer" -> HTTP, Server
_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+|[^\W\d_]+")


def split_words(name: str) -> list[str]:
    """Split an identifier into words.

    Examples:
        >>> split_words("PtrIntId")
        ['Ptr', 'Int', 'Id']
        >>> split_words("email_addr")
        ['email', 'addr']
        >>> split_words("AA")
        ['AA']
    """
    return _WORD_RE.findall(name)


def transform_name(name: str, case: NameCase | str = NameCase.AS_DECLARED) -> str:
    """Render a field name in the requested casing.

    Args:
        name: Declared field name
        case: Target casing

    Returns:
        Field name as it appears in a FieldPath segment
    """
    case = NameCase(case)
    if case == NameCase.AS_DECLARED:
        return name

    words = split_words(name)
    if not words:
        return name

    if case == NameCase.SNAKE:
        return slugify(" ".join(words), separator="_")
    if case == NameCase.KEBAB:
        return slugify(" ".join(words), separator="-")

    lowered = [w.lower() for w in words]
    if case == NameCase.PASCAL:
        return "".join(w.capitalize() for w in lowered)
    return lowered[0] + "".join(w.capitalize() for w in lowered[1:])
