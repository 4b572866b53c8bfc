# record_input.py
"""
Form boundary for tanker records.

Raw form values (strings) are checked here, before anything reaches the
record store. All field problems are collected and raised together so the
form can flag every field at once.
"""

import re
from typing import Dict, Mapping, Optional

from config import AppConfig
from errors import ValidationError
from models import RecordInput, QUANTITY_FIELDS

TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")
# "11950,5": a comma is a decimal separator only before one or two final digits
DECIMAL_COMMA_RE = re.compile(r"^-?\d+,\d{1,2}$")

REQUIRED_TEXT_FIELDS = ("tanker_number", "entry_time", "bc_number", "destination")
OPTIONAL_TEXT_FIELDS = ("exit_time",)


def serial_number_options(minimum: int = None, maximum: int = None) -> list:
    """['01', '02', ..., '08'] for the configured range"""
    minimum = AppConfig.SERIAL_MIN if minimum is None else minimum
    maximum = AppConfig.SERIAL_MAX if maximum is None else maximum
    return [f"{n:02d}" for n in range(minimum, maximum + 1)]


SERIAL_NUMBER_OPTIONS = serial_number_options()


def next_serial_number(current: Optional[str], minimum: int = None, maximum: int = None) -> str:
    """
    Serial label that follows ``current`` (08 -> 01).

    The serial number is an operator convenience, not an identifier; anything
    unparsable restarts the cycle.
    """
    minimum = AppConfig.SERIAL_MIN if minimum is None else minimum
    maximum = AppConfig.SERIAL_MAX if maximum is None else maximum
    try:
        value = int(str(current).strip())
    except (TypeError, ValueError):
        return f"{minimum:02d}"
    if value < minimum or value >= maximum:
        return f"{minimum:02d}"
    return f"{value + 1:02d}"


def _to_number(raw: str):
    text = raw.strip()
    if "," in text:
        # "12,000" is ambiguous (grouping or decimal), so it is rejected
        if not DECIMAL_COMMA_RE.match(text):
            raise ValueError(f"Ambiguous number: {raw!r}")
        text = text.replace(",", ".")
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_record_form(form: Mapping[str, object]) -> RecordInput:
    """
    Validate a submitted entry form and build a RecordInput.

    ``form`` uses the RecordInput attribute names. Raises ValidationError
    whose ``errors`` maps field name -> translation key.
    """
    errors: Dict[str, str] = {}
    values: Dict[str, object] = {}

    for name in REQUIRED_TEXT_FIELDS:
        text = str(form.get(name) or "").strip()
        if not text:
            errors[name] = "form.required"
        values[name] = text

    for name in OPTIONAL_TEXT_FIELDS:
        values[name] = str(form.get(name) or "").strip()

    for name in ("entry_time", "exit_time"):
        text = values[name]
        if text and name not in errors and not TIME_RE.match(text):
            errors[name] = "form.invalidTime"

    for name in QUANTITY_FIELDS:
        raw = form.get(name)
        if raw is None or not str(raw).strip():
            errors[name] = "form.required"
            continue
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            number = raw
        else:
            try:
                number = _to_number(str(raw))
            except ValueError:
                errors[name] = "form.invalidNumber"
                continue
        if number != number or number in (float("inf"), float("-inf")):
            errors[name] = "form.invalidNumber"
            continue
        if number < 0:
            errors[name] = "form.negativeNumber"
            continue
        values[name] = number

    serial = str(form.get("serial_number") or "").strip()
    values["serial_number"] = serial or SERIAL_NUMBER_OPTIONS[0]

    if errors:
        raise ValidationError(errors)

    return RecordInput(**values)
