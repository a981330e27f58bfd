"""Tests for Swiss currency, date/time and number formatting."""

from datetime import UTC, date, datetime
from decimal import Decimal
from unittest.mock import patch

import pytest

from yogaswiss.i18n.formatting import (
    CURRENCY_CODE,
    TIMEZONE,
    Formatter,
    build_skeletons,
    profile_for,
)
from yogaswiss.i18n.registry import SUPPORTED_LOCALES, Locale

SAMPLE_DT = datetime(2024, 1, 15, 13, 30, tzinfo=UTC)


class TestProfile:
    def test_defaults(self):
        profile = profile_for(Locale.FR_CH)
        assert profile.currency == CURRENCY_CODE == "CHF"
        assert profile.timezone == TIMEZONE == "Europe/Zurich"
        assert profile.babel_locale == "fr_CH"

    def test_dialect_uses_dialect_cldr_data(self):
        assert profile_for(Locale.GSW).babel_locale == "gsw_CH"


class TestBuildSkeletons:
    def test_default_options(self):
        assert build_skeletons(
            {"year": "numeric", "month": "short", "day": "numeric", "hour": "2-digit", "minute": "2-digit"}
        ) == ("yMMMd", "HHmm")

    def test_hour12(self):
        assert build_skeletons({"hour": "numeric", "minute": "2-digit", "hour12": True}) == ("", "hmm")

    def test_weekday_and_long_month(self):
        assert build_skeletons({"weekday": "long", "month": "long", "day": "numeric"}) == (
            "MMMMEEEEd",
            "",
        )

    def test_none_drops_field(self):
        assert build_skeletons({"year": "numeric", "month": None}) == ("y", "")

    @pytest.mark.parametrize("options", [{"month": "bogus"}, {"hour": "3-digit"}, {"second": "long"}])
    def test_unknown_values_raise(self, options):
        with pytest.raises(ValueError):
            build_skeletons(options)


class TestCurrency:
    def test_swiss_german(self):
        result = Formatter.for_locale(Locale.DE_CH).format_currency(1234.5)
        assert "CHF" in result
        assert result.endswith("234.50")
        assert result != "CHF 1234.50"

    def test_decimal_amount(self):
        result = Formatter.for_locale(Locale.DE_CH).format_currency(Decimal("10"))
        assert result.endswith("10.00")

    @pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
    def test_every_locale_uses_francs(self, locale):
        assert "CHF" in Formatter.for_locale(locale).format_currency(5)

    def test_failure_falls_back_to_fixed_format(self):
        formatter = Formatter.for_locale(Locale.DE_CH)
        with patch(
            "yogaswiss.i18n.formatting.numbers.format_currency",
            side_effect=RuntimeError("no CLDR data"),
        ):
            assert formatter.format_currency(1234.5) == "CHF 1234.50"

    def test_unformattable_amount(self):
        assert Formatter.for_locale(Locale.EN_CH).format_currency("abc") == "CHF abc"


class TestDatetime:
    def test_defaults_in_zurich_time(self):
        result = Formatter.for_locale(Locale.DE_CH).format_datetime(SAMPLE_DT)
        assert "2024" in result
        assert "15" in result
        assert "14:30" in result

    def test_time_zone_override(self):
        result = Formatter.for_locale(Locale.DE_CH).format_datetime(SAMPLE_DT, {"time_zone": "UTC"})
        assert "13:30" in result

    def test_date_only(self):
        result = Formatter.for_locale(Locale.FR_CH).format_datetime(
            SAMPLE_DT, {"hour": None, "minute": None}
        )
        assert "2024" in result
        assert ":" not in result

    def test_time_only(self):
        result = Formatter.for_locale(Locale.IT_CH).format_datetime(
            SAMPLE_DT, {"year": None, "month": None, "day": None}
        )
        assert result == "14:30"

    def test_bad_option_falls_back_to_iso(self):
        result = Formatter.for_locale(Locale.DE_CH).format_datetime(SAMPLE_DT, {"month": "bogus"})
        assert result == SAMPLE_DT.isoformat()

    def test_no_fields_falls_back_to_iso(self):
        empty = {"year": None, "month": None, "day": None, "hour": None, "minute": None}
        result = Formatter.for_locale(Locale.DE_CH).format_datetime(SAMPLE_DT, empty)
        assert result == SAMPLE_DT.isoformat()

    def test_plain_date_value(self):
        result = Formatter.for_locale(Locale.EN_CH).format_datetime(
            date(2024, 3, 1), {"hour": None, "minute": None}
        )
        assert "2024" in result

    def test_plain_date_has_no_time_with_default_options(self):
        result = Formatter.for_locale(Locale.DE_CH).format_datetime(date(2024, 3, 1))
        assert "2024" in result
        assert ":" not in result

    def test_plain_date_not_shifted_by_time_zone(self):
        result = Formatter.for_locale(Locale.DE_CH).format_datetime(
            date(2024, 3, 1), {"time_zone": "America/New_York"}
        )
        assert result.startswith("1.")
        assert "29" not in result

    def test_unformattable_value(self):
        assert Formatter.for_locale(Locale.DE_CH).format_datetime("soon") == "soon"


class TestNumber:
    def test_grouping_and_two_fraction_digits(self):
        result = Formatter.for_locale(Locale.DE_CH).format_number(1234.567)
        assert result.endswith("234.57")
        assert result != "1234.57"

    def test_integer_has_no_fraction(self):
        assert Formatter.for_locale(Locale.DE_CH).format_number(42) == "42"

    def test_failure_falls_back_to_str(self):
        formatter = Formatter.for_locale(Locale.FR_CH)
        with patch(
            "yogaswiss.i18n.formatting.numbers.format_decimal",
            side_effect=RuntimeError("boom"),
        ):
            assert formatter.format_number(1234.5) == "1234.5"
