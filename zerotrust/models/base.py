"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Wire model base class and optional-value helpers.

Every record exchanged with the API derives from ``WireModel``. A field is
encoded in one of three ways:

- required: always present on the wire; ``None`` is written as ``null``.
- omit-if-empty: absent when the value is ``None``, ``""``, ``0``, ``[]`` or
  ``{}``. Booleans are never considered empty.
- omit-if-unset: absent only when the value is ``None``. This is how
  tri-state booleans (unset / ``False`` / ``True``) survive a round trip.

Subclasses list their field names in the ``omit_if_empty`` and
``omit_if_unset`` class variables; everything else is required. Decoding
ignores unknown keys and treats ``null`` as an absent field, so the field
falls back to its zero value.
"""

from typing import Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, list, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


class WireModel(BaseModel):
    """Base class for JSON records exchanged with the API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    omit_if_empty: ClassVar[FrozenSet[str]] = frozenset()
    omit_if_unset: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @model_serializer(mode="wrap")
    def _omit_fields(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            key = field.alias if info.by_alias and field.alias else name
            if key not in data:
                continue
            if name in self.omit_if_unset and data[key] is None:
                del data[key]
            elif name in self.omit_if_empty and _is_empty(data[key]):
                del data[key]
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Encode to a JSON-compatible dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_wire(cls, data: Any):
        """Decode from a JSON-compatible dict using wire field names."""
        return cls.model_validate(data)


def optional_bool(value: Optional[bool]) -> Optional[bool]:
    """
    Build a tri-state boolean.

    Raises:
        TypeError: If value is neither None nor a bool
    """
    if value is not None and not isinstance(value, bool):
        raise TypeError(f"expected bool or None, got {type(value).__name__}")
    return value


def optional_int(value: Optional[int]) -> Optional[int]:
    """
    Build an optional integer; ``0`` stays distinct from unset.

    Raises:
        TypeError: If value is neither None nor an int
    """
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"expected int or None, got {type(value).__name__}")
    return value


def optional_str(value: Optional[str]) -> Optional[str]:
    """
    Build an optional string; ``""`` stays distinct from unset.

    Raises:
        TypeError: If value is neither None nor a str
    """
    if value is not None and not isinstance(value, str):
        raise TypeError(f"expected str or None, got {type(value).__name__}")
    return value
