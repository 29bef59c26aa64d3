"""Duration text parsing tests."""

import argparse
import logging

import pytest

from human_duration import Duration, parse_duration
from human_duration._errors import (
    InputTooLongError,
    InvalidFormatError,
    ParseError,
    ParseErrorKind,
    ParseOverflowError,
)


class TestCompactForms:
    """Compact forms accepted by the original command-line flag syntax."""

    @pytest.mark.parametrize(
        "text, seconds, minutes",
        [
            ("10s", 10, 0),
            ("60s", 60, 1),
            ("61s", 61, 1),
            ("5m", 300, 5),
            ("60m", 3600, 60),
            ("61m", 3660, 61),
            ("4m 10s", 250, 4),
            ("4m10s", 250, 4),
            ("3m60s", 240, 4),
            ("3m61s", 241, 4),
        ],
    )
    def test_seconds_and_minutes(self, text, seconds, minutes):
        d = parse_duration(text)
        assert d.total_seconds() == seconds
        assert d.total_minutes() == minutes

    @pytest.mark.parametrize(
        "text, hours, days",
        [
            ("5h", 5, 0),
            ("24h", 24, 1),
            ("25h", 25, 1),
            ("5d", 120, 5),
            ("32d", 768, 32),
        ],
    )
    def test_hours_and_days(self, text, hours, days):
        d = parse_duration(text)
        assert d.total_hours() == hours
        assert d.total_days() == days

    def test_all_units(self):
        assert parse_duration("8h5m10s").total_seconds() == 8 * 3600 + 5 * 60 + 10


class TestWordForms:
    def test_sentence(self):
        d = parse_duration("2 days, 3 hours and 15 minutes")
        assert d.total_seconds() == 2 * 86400 + 3 * 3600 + 15 * 60 == 184500

    def test_singular(self):
        assert parse_duration("1 day").total_seconds() == 86400

    def test_spaced_abbreviation(self):
        assert parse_duration("10 s") == Duration(10)

    @pytest.mark.parametrize(
        "spelling",
        ["h", "hr", "hrs", "hour", "hours"],
    )
    def test_hour_spellings(self, spelling):
        assert parse_duration(f"2 {spelling}") == Duration(7200)

    @pytest.mark.parametrize(
        "text, seconds",
        [
            ("1 d", 86400),
            ("1 days", 86400),
            ("1 min", 60),
            ("2 mins", 120),
            ("1 minute", 60),
            ("1 sec", 1),
            ("3 secs", 3),
            ("1 second", 1),
            ("9 seconds", 9),
        ],
    )
    def test_other_spellings(self, text, seconds):
        assert parse_duration(text).total_seconds() == seconds

    def test_leading_zeros(self):
        assert parse_duration("007 minutes") == Duration(420)

    def test_zero_value(self):
        assert parse_duration("0 seconds") == Duration(0)


class TestCaseAndWhitespace:
    def test_case_insensitive(self):
        assert parse_duration("1 HOUR") == parse_duration("1hour") == parse_duration("1 Hour")

    def test_mixed_case_abbreviation(self):
        assert parse_duration("1H 30M") == Duration(5400)

    def test_surrounding_whitespace(self):
        assert parse_duration("  \t1h\n ") == Duration(3600)

    def test_commas_without_spaces(self):
        assert parse_duration("1h,2m,3s") == Duration(3723)

    def test_and_without_comma(self):
        assert parse_duration("1 hour and 1 second") == Duration(3601)

    def test_comma_and(self):
        assert parse_duration("1 day, and 1 hour") == Duration(90000)

    def test_trailing_separator(self):
        assert parse_duration("5m,") == Duration(300)


class TestOrderAndDuplicates:
    def test_order_does_not_matter(self):
        assert parse_duration("5m 1h") == parse_duration("1h 5m")

    def test_duplicate_units_add_up(self):
        assert parse_duration("1h 2h") == Duration.from_components(0, 3, 0, 0)

    def test_duplicate_spellings_add_up(self):
        assert parse_duration("1 hour, 30 minutes and 30 min") == Duration(7200)

    def test_unit_overflow_folds(self):
        assert parse_duration("90 minutes").components() == (0, 1, 30, 0)


class TestInvalidFormat:
    @pytest.mark.parametrize(
        "text",
        ["", "   ", "banana", "5", "hours 5", "and", ", ,"],
    )
    def test_rejected(self, text):
        with pytest.raises(InvalidFormatError) as exc:
            parse_duration(text)
        assert exc.value.kind is ParseErrorKind.INVALID_FORMAT

    def test_unknown_unit(self):
        with pytest.raises(InvalidFormatError) as exc:
            parse_duration("3 fortnights")
        assert exc.value.token == "fortnights"
        assert exc.value.position == 2

    def test_unit_prefix_not_guessed(self):
        with pytest.raises(InvalidFormatError):
            parse_duration("3 hou")

    def test_unit_without_number(self):
        with pytest.raises(InvalidFormatError, match="missing a number") as exc:
            parse_duration("hours 5")
        assert exc.value.token == "hours"
        assert exc.value.position == 0

    def test_dangling_number(self):
        with pytest.raises(InvalidFormatError, match="missing a unit") as exc:
            parse_duration("1h 30")
        assert exc.value.token == "30"
        assert exc.value.position == 3

    def test_two_numbers(self):
        with pytest.raises(InvalidFormatError, match="missing a unit"):
            parse_duration("1 2 hours")

    def test_two_units(self):
        with pytest.raises(InvalidFormatError, match="missing a number"):
            parse_duration("1 hour minutes")

    def test_separator_inside_pair(self):
        with pytest.raises(InvalidFormatError) as exc:
            parse_duration("5, minutes")
        assert exc.value.token == ","

    def test_negative_number(self):
        with pytest.raises(InvalidFormatError) as exc:
            parse_duration("-5m")
        assert exc.value.token == "-"
        assert exc.value.position == 0

    def test_decimal_number(self):
        with pytest.raises(InvalidFormatError) as exc:
            parse_duration("1.5h")
        assert exc.value.token == "."
        assert exc.value.position == 1

    def test_junk_after_valid_text(self):
        with pytest.raises(InvalidFormatError):
            parse_duration("1h 5m please")

    def test_input_too_long(self):
        with pytest.raises(InputTooLongError, match="too long") as exc:
            parse_duration("1s " * 500)
        assert exc.value.kind is ParseErrorKind.INPUT_TOO_LONG

    def test_valid_text_over_limit_is_not_a_format_error(self):
        with pytest.raises(ParseError) as exc:
            parse_duration("0s " * 400)
        assert not isinstance(exc.value, InvalidFormatError)
        assert isinstance(exc.value, InputTooLongError)

    def test_input_limit_can_be_raised(self):
        assert parse_duration("1s " * 500, max_input_length=None) == Duration(500)

    def test_input_limit_can_be_lowered(self):
        with pytest.raises(InputTooLongError):
            parse_duration("10 minutes", max_input_length=5)

    def test_non_string(self):
        with pytest.raises(TypeError):
            parse_duration(10)


class TestOverflow:
    def test_literal_too_large(self):
        with pytest.raises(ParseOverflowError) as exc:
            parse_duration("18446744073709551616s")
        assert exc.value.kind is ParseErrorKind.OVERFLOW
        assert exc.value.token == "18446744073709551616"

    def test_max_literal_accepted(self):
        assert parse_duration("18446744073709551615s").total_seconds() == 2**64 - 1

    def test_scaled_literal_too_large(self):
        with pytest.raises(ParseOverflowError):
            parse_duration("18446744073709551615d")

    def test_accumulated_total_too_large(self):
        with pytest.raises(ParseOverflowError):
            parse_duration("18446744073709551615s 1s")

    def test_very_long_literal(self):
        with pytest.raises(ParseOverflowError):
            parse_duration("9" * 500 + "s")

    def test_overflow_is_overflow_error(self):
        with pytest.raises(OverflowError):
            parse_duration("99999999999999999999999 days")


class TestErrorContract:
    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_duration("banana")

    def test_deterministic(self):
        messages = set()
        for _ in range(3):
            with pytest.raises(ParseError) as exc:
                parse_duration("banana")
            messages.add((str(exc.value), exc.value.position))
        assert len(messages) == 1

    def test_user_message_hides_input(self):
        with pytest.raises(ParseError) as exc:
            parse_duration("secret-token")
        assert "secret" not in str(exc.value)
        assert "secret" in exc.value.internal()

    def test_rejection_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="human_duration"):
            with pytest.raises(ParseError):
                parse_duration("banana")
        assert "banana" in caplog.text

    def test_lexer_error_is_wrapped(self):
        with pytest.raises(InvalidFormatError) as exc:
            parse_duration("1h!")
        assert exc.value.wrapped is not None


class TestClassmethod:
    def test_duration_parse(self):
        assert Duration.parse("1h30m") == Duration(5400)


class TestArgparseType:
    def test_as_argument_type(self):
        parser = argparse.ArgumentParser()
        parser.add_argument("--duration", type=parse_duration)
        args = parser.parse_args(["--duration=8h5m10s"])
        assert args.duration.total_hours() == 8
        assert args.duration.total_minutes() == 485
        assert args.duration.total_seconds() == 29110

    def test_invalid_argument_exits(self):
        parser = argparse.ArgumentParser()
        parser.add_argument("--duration", type=parse_duration)
        with pytest.raises(SystemExit):
            parser.parse_args(["--duration=soon"])
