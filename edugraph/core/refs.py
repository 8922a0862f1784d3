"""
Entity references and id coercion.

Backends refer to related entities loosely: a course enrollment may carry
``course: 7``, ``course: "7"`` or ``course: {"id": 7, "name": ...}``.
These helpers collapse both shapes into a single id at the boundary so
resolvers never inspect the raw payload themselves.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


Number = Union[int, float]


@dataclass(frozen=True)
class IdRef:
    """A reference given as a bare id."""
    id: Any


@dataclass(frozen=True)
class EmbeddedRef:
    """A reference given as an embedded object."""
    data: dict

    @property
    def id(self) -> Any:
        return self.data.get("id")


EntityRef = Union[IdRef, EmbeddedRef]


def to_ref(value: Any) -> Optional[EntityRef]:
    """
    Classify a raw reference value.

    Args:
        value: Raw field value from a backend payload or mutation input

    Returns:
        EmbeddedRef for objects, IdRef for anything else, None when absent
    """
    if value is None:
        return None
    if isinstance(value, dict):
        return EmbeddedRef(value)
    return IdRef(value)


def ref_id(value: Any) -> Optional[Any]:
    """Return the referenced id, or None when missing or empty."""
    ref = to_ref(value)
    if ref is None:
        return None
    ref_value = ref.id
    if ref_value is None or ref_value == "":
        return None
    return ref_value


def first_ref_id(*values: Any) -> Optional[Any]:
    """Return the first non-empty id among several candidate references."""
    for value in values:
        found = ref_id(value)
        if found is not None:
            return found
    return None


def to_number(value: Any) -> Optional[Number]:
    """
    Coerce an id to a number.

    Integral values become int, other numeric strings float. Anything that
    does not parse becomes None, which serializes as JSON null.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if number != number or number in (float("inf"), float("-inf")):
        return None
    return int(number) if number.is_integer() else number


def id_param(value: Any) -> str:
    """
    Format an id for a query string.

    Integral floats lose their fraction (``5.0`` is sent as ``5``), the way
    a JS client stringifies numbers.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
