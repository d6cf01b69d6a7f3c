"""Schema-tolerant field resolution.

The listing endpoint does not agree with itself on field names: a
service's name may arrive as ``name``, ``service_name`` or ``title``.
Each canonical field is described by a ``FieldSpec``: an ordered tuple
of accessors plus a coercion and a default. The first accessor that
yields a present value wins; later candidates are ignored even when
they hold a different value. For price and duration a numeric zero (or
``False``) is not a present value, so ``{"price": 0, "cost": 800}``
resolves to 800.

Resolution never raises. Anything missing or malformed degrades to
the field's default.
"""

from __future__ import annotations

import hashlib
import json
import math
import re
from dataclasses import dataclass
from typing import Any, Callable

from salon_catalog.domain.service import CanonicalService, Identity, RawRecord

Accessor = Callable[[RawRecord], Any]

DEFAULT_CATEGORY = "General"
DEFAULT_DESCRIPTION = "No description available"
DEFAULT_PRICE = 0.0

# Leading numeric prefix, read the way the listing's web client reads it
# ("500.50" -> 500.5, "45 mins" -> 45, "abc" -> no match).
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")

_MISSING = object()


def key(name: str) -> Accessor:
    """Accessor reading a single top-level key."""

    def read(record: RawRecord) -> Any:
        return record.get(name, _MISSING)

    read.__name__ = f"key({name!r})"
    return read


def _is_present(value: Any) -> bool:
    return value is not _MISSING and value is not None and value != ""


def _is_zero(value: Any) -> bool:
    return value is False or (isinstance(value, (int, float)) and value == 0)


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            return None
        number = float(match.group(0))
    else:
        return None
    return number if math.isfinite(number) else None


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group(0)) if match else None
    return None


def _to_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _to_identity(value: Any) -> Identity | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        return value
    return None


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Ordered candidates for one canonical field."""

    name: str
    accessors: tuple[Accessor, ...]
    coerce: Callable[[Any], Any]
    default: Any = None
    zero_is_absent: bool = False

    def resolve(self, record: RawRecord) -> Any:
        for accessor in self.accessors:
            value = accessor(record)
            if self.zero_is_absent and _is_zero(value):
                continue
            if _is_present(value):
                # First present candidate wins, even if it fails to coerce
                coerced = self.coerce(value)
                return self.default if coerced is None else coerced
        return self.default


FIELD_SPECS: dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        FieldSpec("identity", (key("id"), key("pk")), _to_identity),
        FieldSpec("name", (key("name"), key("service_name"), key("title")), _to_text),
        FieldSpec(
            "category",
            (key("category"), key("category_name"), key("type")),
            _to_text,
            DEFAULT_CATEGORY,
        ),
        FieldSpec(
            "price",
            (key("price"), key("cost"), key("amount")),
            _to_float,
            DEFAULT_PRICE,
            zero_is_absent=True,
        ),
        FieldSpec(
            "duration",
            (key("duration"), key("time"), key("minutes")),
            _to_int,
            zero_is_absent=True,
        ),
        FieldSpec(
            "description",
            (key("description"), key("details"), key("info")),
            _to_text,
            DEFAULT_DESCRIPTION,
        ),
    )
}


def surrogate_identity(record: RawRecord, index: int) -> str:
    """Stable stand-in identity for records that carry no id/pk."""
    payload = json.dumps(record, sort_keys=True, default=str)
    digest = hashlib.sha1(payload.encode("utf-8")).hexdigest()[:12]
    return f"{index}-{digest}"


def is_active(record: RawRecord) -> bool:
    """
    A record is active unless one of its flags explicitly says otherwise.

    Only strict falsity deactivates: ``is_active is False``,
    ``active is False`` or ``status == "inactive"``. Absent, null, 0
    or "false" do not.
    """
    if record.get("is_active") is False:
        return False
    if record.get("active") is False:
        return False
    if record.get("status") == "inactive":
        return False
    return True


def resolve(record: RawRecord, field: str, index: int = 0) -> Any:
    """
    Resolve one canonical field from a raw record.

    Args:
        record: Raw listing record (any shape)
        field: One of identity, name, category, price, duration,
            description, is_active
        index: Position of the record in the full set, used to build
            surrogate identities

    Returns:
        The canonical value, or the field's default

    Raises:
        KeyError: If ``field`` is not a canonical field name
    """
    if not isinstance(record, dict):
        record = {}

    if field == "is_active":
        return is_active(record)

    if field == "identity":
        identity = FIELD_SPECS["identity"].resolve(record)
        return surrogate_identity(record, index) if identity is None else identity

    if field == "name":
        name = FIELD_SPECS["name"].resolve(record)
        if name is None:
            return f"Service {resolve(record, 'identity', index)}"
        return name

    return FIELD_SPECS[field].resolve(record)


def to_canonical(record: RawRecord, index: int = 0) -> CanonicalService:
    """Build the full canonical view of a raw record."""
    if not isinstance(record, dict):
        record = {}

    identity = resolve(record, "identity", index)
    name = FIELD_SPECS["name"].resolve(record)

    return CanonicalService(
        identity=identity,
        display_name=f"Service {identity}" if name is None else name,
        category=resolve(record, "category"),
        price=resolve(record, "price"),
        duration_minutes=resolve(record, "duration"),
        description=resolve(record, "description"),
        is_active=is_active(record),
    )
