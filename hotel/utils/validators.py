"""Input validation helpers."""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterable, Mapping

from hotel.models.person import WorkType

PERSON_REQUIRED_FIELDS = ("name", "work", "mobile", "email")
MOBILE_DIGITS = 10

MISSING_FIELDS = "Missing required fields"
INVALID_MOBILE = "Invalid mobile number"
INVALID_WORK_TYPE = "Invalid work type"


def missing_fields(payload: Mapping[str, Any], required: Iterable[str] = PERSON_REQUIRED_FIELDS) -> list[str]:
    """Return the required keys that are absent or falsy in ``payload``."""

    return [field for field in required if not payload.get(field)]


def render_number(value: Any) -> str | None:
    """Render a JSON number as text, or ``None`` if ``value`` is not one.

    Integral floats render without a fractional part so ``9876543210.0``
    and ``9876543210`` are treated alike.
    """

    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def is_valid_mobile(value: Any) -> bool:
    rendered = render_number(value)
    return rendered is not None and rendered.isdigit() and len(rendered) == MOBILE_DIGITS


def check_person_payload(payload: Any) -> str | None:
    """Return the error tag for an unacceptable person payload, else ``None``."""

    if not isinstance(payload, Mapping):
        payload = {}
    if missing_fields(payload):
        return MISSING_FIELDS
    if not is_valid_mobile(payload["mobile"]):
        return INVALID_MOBILE
    return None


def parse_work_type(value: str) -> WorkType | None:
    try:
        return WorkType(value)
    except ValueError:
        return None
