"""JSON-native normalization for free-form metadata carried in records."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


def json_native(value: Any) -> Any:
    """
    Recursively convert a value to the types JSON decoding produces.

    Mappings become dicts with string keys, tuples/sets become lists and
    enums become their values. Scalars are returned unchanged.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): json_native(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [json_native(v) for v in value]
    return value
