# typed_json/shared/utils/text_utils.py

"""Text helpers for computing JSON member names"""

# Standard library imports
from re import compile

_LEADING_UNDERSCORES = compile(r"^_*")


def to_camel_case(name: str) -> str:
    """Convert a field name to lowerCamelCase

    ``snake_case`` words are joined with capitals after the first one and the
    first letter is lowered, so ``UserName`` and ``user_name`` both become
    ``userName``. Leading underscores are kept.

    Args:
        name: Field name as declared

    Returns:
        JSON member name
    """
    match = _LEADING_UNDERSCORES.match(name)
    prefix = match.group(0) if match else ""
    words = [word for word in name[len(prefix) :].split("_") if word]
    if not words:
        return name

    first, *rest = words
    return prefix + first[:1].lower() + first[1:] + "".join(word[:1].upper() + word[1:] for word in rest)


__all__ = ["to_camel_case"]
