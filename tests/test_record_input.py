"""
Tests for record_input.py: entry form checks and serial number rotation.
"""
import pytest

from errors import ValidationError
from record_input import SERIAL_NUMBER_OPTIONS, next_serial_number, parse_record_form


def _form(**overrides):
    form = {
        "serial_number": "03",
        "tanker_number": " TQ-001 ",
        "entry_time": "08:15",
        "exit_time": "",
        "bc_number": "BC-100",
        "ordered_quantity": "12000",
        "loaded_quantity": "11950,5",
        "old_index": "1000",
        "current_index": "12950.5",
        "destination": "Oran",
    }
    form.update(overrides)
    return form


class TestParseRecordForm:

    def test_valid_form(self):
        data = parse_record_form(_form())

        assert data.serial_number == "03"
        assert data.tanker_number == "TQ-001"
        assert data.exit_time == ""
        assert data.ordered_quantity == 12000
        assert isinstance(data.ordered_quantity, int)
        assert data.loaded_quantity == 11950.5
        assert data.current_index == 12950.5

    def test_numbers_are_accepted_as_is(self):
        data = parse_record_form(_form(old_index=0, ordered_quantity=10.5))
        assert data.old_index == 0
        assert data.ordered_quantity == 10.5

    def test_all_problems_reported_together(self):
        with pytest.raises(ValidationError) as excinfo:
            parse_record_form(_form(tanker_number="", destination="  ", loaded_quantity=""))

        assert excinfo.value.errors == {
            "tanker_number": "form.required",
            "destination": "form.required",
            "loaded_quantity": "form.required",
        }

    @pytest.mark.parametrize("raw,key", [
        ("abc", "form.invalidNumber"),
        ("nan", "form.invalidNumber"),
        ("inf", "form.invalidNumber"),
        ("-5", "form.negativeNumber"),
        ("12,000", "form.invalidNumber"),
        ("1,234,5", "form.invalidNumber"),
        ("1.234,5", "form.invalidNumber"),
    ])
    def test_bad_quantities(self, raw, key):
        with pytest.raises(ValidationError) as excinfo:
            parse_record_form(_form(ordered_quantity=raw))
        assert excinfo.value.errors == {"ordered_quantity": key}

    def test_bad_times(self):
        with pytest.raises(ValidationError) as excinfo:
            parse_record_form(_form(entry_time="25:00", exit_time="9h30"))
        assert excinfo.value.errors == {"entry_time": "form.invalidTime", "exit_time": "form.invalidTime"}

    def test_decimal_comma(self):
        data = parse_record_form(_form(loaded_quantity="11950,25", old_index="7,5"))
        assert data.loaded_quantity == 11950.25
        assert data.old_index == 7.5

    def test_exit_time_is_optional_but_checked(self):
        assert parse_record_form(_form(exit_time=None)).exit_time == ""
        assert parse_record_form(_form(exit_time=" 09:30 ")).exit_time == "09:30"

    def test_seconds_are_allowed(self):
        assert parse_record_form(_form(exit_time="09:30:15")).exit_time == "09:30:15"

    def test_serial_defaults_to_first_option(self):
        assert parse_record_form(_form(serial_number="")).serial_number == "01"


class TestSerialNumbers:

    def test_options(self):
        assert SERIAL_NUMBER_OPTIONS == ["01", "02", "03", "04", "05", "06", "07", "08"]

    def test_increments(self):
        assert next_serial_number("01") == "02"
        assert next_serial_number("07") == "08"

    def test_wraps_after_last(self):
        assert next_serial_number("08") == "01"

    @pytest.mark.parametrize("current", [None, "", "xx", "0", "42"])
    def test_out_of_cycle_restarts(self, current):
        assert next_serial_number(current) == "01"

    def test_custom_range(self):
        assert next_serial_number("03", minimum=2, maximum=3) == "02"
        assert next_serial_number("02", minimum=2, maximum=3) == "03"
