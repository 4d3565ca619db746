# typed_json/shared/utils/type_utils.py

"""Naming of runtime type descriptors"""

# Standard library imports
from typing import NewType
from typing import TypeAliasType
from typing import get_origin


def type_name(target: object) -> str:
    """Fully-qualified name of a type descriptor

    Classes, ``NewType``s and ``type`` aliases are named ``module.qualname``;
    parameterised forms such as ``list[int]`` use their ``repr``.

    Args:
        target: A class or typing form

    Returns:
        Name used to key extra decoders and the decoder cache
    """
    if get_origin(target) is not None:
        return repr(target)
    if isinstance(target, (type, TypeAliasType, NewType)):
        qualname = getattr(target, "__qualname__", target.__name__)
        return f"{target.__module__}.{qualname}"
    return repr(target)


__all__ = ["type_name"]
