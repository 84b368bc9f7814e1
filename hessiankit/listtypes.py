"""Hessian list tags and the mapping from element type names to Java list types."""

from __future__ import annotations

import threading
from typing import Dict, Optional

from hessiankit.longs import HessianDecodeError

BC_LIST_VARIABLE = 0x55
BC_LIST_FIXED = 0x56  # 'V'
BC_LIST_VARIABLE_UNTYPED = 0x57
BC_LIST_FIXED_UNTYPED = 0x58

LIST_FIXED_TYPED_LEN_TAG_MIN = 0x70
LIST_FIXED_TYPED_LEN_TAG_MAX = 0x77
LIST_FIXED_UNTYPED_LEN_TAG_MIN = 0x78
LIST_FIXED_UNTYPED_LEN_TAG_MAX = 0x7F

_type_names: Dict[str, str] = {
    "string": "[string",
    "int8": "[short",
    "int16": "[short",
    "uint16": "[short",
    "int32": "[int",
    "uint32": "[int",
    "int": "[long",
    "uint": "[long",
    "int64": "[long",
    "uint64": "[long",
    "float32": "[float",
    "float64": "[double",
    "bool": "[boolean",
    "time.Time": "[date",
    "java_exception.Throwabler": "[java.lang.Throwable",
    "hessian.Object": "[object",
    # Python's own names for the same element types.
    "str": "[string",
    "float": "[double",
    "datetime": "[date",
    "datetime.datetime": "[date",
    "object": "[object",
}
_type_names_lock = threading.Lock()


def register_type_name(type_name: str, java_type: str) -> None:
    """Map an element type name to the Java type its lists are written as."""
    with _type_names_lock:
        _type_names[type_name] = "[" + java_type


def get_list_type_name(type_name: str) -> Optional[str]:
    """Return the Java list type for a list whose elements have ``type_name``.

    Each ``[]`` in ``type_name`` adds one level of nesting; a leading ``*`` on
    the base name is ignored. ``None`` is returned for an unknown base type.
    """
    depth = type_name.count("[]")
    base = type_name.replace("[]", "")
    if base.startswith("*"):
        base = base[1:]
    with _type_names_lock:
        java_name = _type_names.get(base)
    if java_name is None:
        return None
    return "[" * depth + java_name


def _is_fixed_typed_len_tag(tag: int) -> bool:
    return LIST_FIXED_TYPED_LEN_TAG_MIN <= tag <= LIST_FIXED_TYPED_LEN_TAG_MAX


def _is_fixed_untyped_len_tag(tag: int) -> bool:
    return LIST_FIXED_UNTYPED_LEN_TAG_MIN <= tag <= LIST_FIXED_UNTYPED_LEN_TAG_MAX


def is_typed_list_tag(tag: int) -> bool:
    """Tell whether ``tag`` starts a typed list (``x55``, ``'V'`` or ``x70-x77``)."""
    return tag in (BC_LIST_FIXED, BC_LIST_VARIABLE) or _is_fixed_typed_len_tag(tag)


def is_untyped_list_tag(tag: int) -> bool:
    """Tell whether ``tag`` starts an untyped list (``x57``, ``x58`` or ``x78-x7f``)."""
    return tag in (BC_LIST_FIXED_UNTYPED, BC_LIST_VARIABLE_UNTYPED) or _is_fixed_untyped_len_tag(
        tag
    )


def fixed_list_length(tag: int) -> Optional[int]:
    """Return the length a compact list tag carries.

    ``None`` is returned for list tags whose length is not in the tag: the
    fixed forms followed by an int and the variable-length forms. A tag that
    starts no list raises ``HessianDecodeError``.
    """
    if _is_fixed_typed_len_tag(tag):
        return tag - LIST_FIXED_TYPED_LEN_TAG_MIN
    if _is_fixed_untyped_len_tag(tag):
        return tag - LIST_FIXED_UNTYPED_LEN_TAG_MIN
    if is_typed_list_tag(tag) or is_untyped_list_tag(tag):
        return None
    raise HessianDecodeError(f"error list tag: {tag:#x}")