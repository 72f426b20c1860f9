"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Zerotrust SDK, a product of Garudex Labs

Unit tests for the Duration value.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from zerotrust.models.duration import Duration
from zerotrust.models.teams_rules import TeamsCheckSessionSettings


class TestDurationParse:
    """Tests for parsing unit-suffixed duration strings."""

    def test_parse_canonical_form(self):
        assert Duration.parse("15m0s") == Duration(timedelta(seconds=900))

    def test_parse_full_form(self):
        assert Duration.parse("1h30m0s").value == timedelta(hours=1, minutes=30)

    def test_parse_partial_forms(self):
        assert Duration.parse("900s") == Duration.of(minutes=15)
        assert Duration.parse("2h") == Duration.of(hours=2)
        assert Duration.parse("1h5s") == Duration.of(hours=1, seconds=5)

    def test_parse_fractions(self):
        assert Duration.parse("1.5h") == Duration.of(hours=1, minutes=30)
        assert Duration.parse(".5s") == Duration(timedelta(milliseconds=500))

    def test_parse_sub_second_units(self):
        assert Duration.parse("250ms").value == timedelta(milliseconds=250)
        assert Duration.parse("10us").value == timedelta(microseconds=10)
        assert Duration.parse("10µs").value == timedelta(microseconds=10)
        assert Duration.parse("3000ns").value == timedelta(microseconds=3)

    def test_parse_zero(self):
        assert Duration.parse("0") == Duration()
        assert Duration.parse("0s") == Duration()

    def test_parse_sign(self):
        assert Duration.parse("-90s").value == timedelta(seconds=-90)
        assert Duration.parse("+90s").value == timedelta(seconds=90)

    @pytest.mark.parametrize("text", ["", "abc", "15", "1x", "h", "1h-5m", "."])
    def test_parse_rejects_invalid(self, text):
        with pytest.raises(ValueError, match="invalid duration"):
            Duration.parse(text)


class TestDurationFormat:
    """Tests for formatting to the server's canonical form."""

    def test_minutes(self):
        assert str(Duration.of(seconds=900)) == "15m0s"

    def test_hours(self):
        assert str(Duration.of(hours=1)) == "1h0m0s"
        assert str(Duration.of(hours=26, minutes=3, seconds=4)) == "26h3m4s"

    def test_seconds_only(self):
        assert str(Duration.of(seconds=42)) == "42s"

    def test_zero(self):
        assert str(Duration()) == "0s"

    def test_fractional_seconds(self):
        assert str(Duration(timedelta(seconds=1, milliseconds=500))) == "1.5s"

    def test_sub_second(self):
        assert str(Duration(timedelta(milliseconds=500))) == "500ms"
        assert str(Duration(timedelta(microseconds=1500))) == "1.5ms"
        assert str(Duration(timedelta(microseconds=10))) == "10µs"

    def test_negative(self):
        assert str(Duration(timedelta(seconds=-90))) == "-1m30s"

    def test_repr(self):
        assert repr(Duration.of(minutes=15)) == "Duration('15m0s')"

    def test_format_parse_agree(self):
        for value in ("15m0s", "1h0m0s", "2h30m15s", "45s", "1.25s", "750ms"):
            assert str(Duration.parse(value)) == value


class TestDurationValue:
    def test_equality_and_hash(self):
        assert Duration.of(minutes=1) == Duration.parse("60s")
        assert hash(Duration.of(minutes=1)) == hash(Duration.parse("60s"))
        assert Duration.of(minutes=1) != Duration.of(minutes=2)

    def test_not_equal_to_other_types(self):
        assert Duration.of(minutes=1) != "1m0s"

    def test_rejects_non_timedelta(self):
        with pytest.raises(TypeError):
            Duration(60)

    def test_coerce(self):
        assert Duration.coerce("15m0s") == Duration.of(minutes=15)
        assert Duration.coerce(timedelta(minutes=15)) == Duration.of(minutes=15)
        d = Duration.of(minutes=15)
        assert Duration.coerce(d) is d
        with pytest.raises(ValueError):
            Duration.coerce(900)

    def test_total_seconds(self):
        assert Duration.parse("1m30s").total_seconds() == 90.0


class TestDurationInModels:
    """Tests for Duration as a model field."""

    def test_decode_from_string(self):
        settings = TeamsCheckSessionSettings.model_validate(
            {"enforce": True, "duration": "15m0s"}
        )
        assert settings.duration == Duration.of(minutes=15)

    def test_encode_to_string(self):
        settings = TeamsCheckSessionSettings(enforce=True, duration=Duration.of(minutes=15))
        assert settings.to_wire() == {"enforce": True, "duration": "15m0s"}

    def test_accepts_timedelta(self):
        settings = TeamsCheckSessionSettings(duration=timedelta(hours=1))
        assert settings.to_wire()["duration"] == "1h0m0s"

    def test_default_is_zero(self):
        assert TeamsCheckSessionSettings().to_wire() == {"enforce": False, "duration": "0s"}

    def test_invalid_string_fails_validation(self):
        with pytest.raises(ValidationError):
            TeamsCheckSessionSettings.model_validate({"duration": "fifteen minutes"})
