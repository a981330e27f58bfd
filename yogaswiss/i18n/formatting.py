"""Locale-aware currency, date/time and number formatting (Babel).

Every public ``format_*`` method catches its own failures and returns a
fixed-format fallback string instead, so a missing CLDR entry or a bad
argument never breaks the caller.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime

from babel import dates, numbers

from yogaswiss.i18n.registry import Locale, babel_locale_of

_log = logging.getLogger(__name__)

CURRENCY_CODE = "CHF"
TIMEZONE = "Europe/Zurich"
NUMBER_PATTERN = "#,##0.##"

DEFAULT_DATETIME_OPTIONS: dict[str, str | bool | None] = {
    "year": "numeric",
    "month": "short",
    "day": "numeric",
    "hour": "2-digit",
    "minute": "2-digit",
}

# option value -> CLDR skeleton field
_DATE_FIELDS = {
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {"numeric": "M", "2-digit": "MM", "short": "MMM", "long": "MMMM", "narrow": "MMMMM"},
    "weekday": {"short": "EEE", "long": "EEEE", "narrow": "EEEEE"},
    "day": {"numeric": "d", "2-digit": "dd"},
}
_TIME_FIELDS = {
    "minute": {"numeric": "m", "2-digit": "mm"},
    "second": {"numeric": "s", "2-digit": "ss"},
}
_HOUR_WIDTH = {"numeric": 1, "2-digit": 2}


@dataclass(frozen=True)
class FormattingProfile:
    locale: Locale
    babel_locale: str
    currency: str = CURRENCY_CODE
    timezone: str = TIMEZONE
    number_pattern: str = NUMBER_PATTERN


def profile_for(locale: Locale) -> FormattingProfile:
    return FormattingProfile(locale=locale, babel_locale=babel_locale_of(locale))


def build_skeletons(options: Mapping[str, str | bool | None]) -> tuple[str, str]:
    """Translate Intl-style options into (date skeleton, time skeleton).

    Raises ValueError for unknown option values.
    """
    date_part = ""
    for name, table in _DATE_FIELDS.items():
        value = options.get(name)
        if value is None:
            continue
        if value not in table:
            raise ValueError(f"Unsupported {name} option: {value!r}")
        date_part += table[value]

    time_part = ""
    hour = options.get("hour")
    if hour is not None:
        if hour not in _HOUR_WIDTH:
            raise ValueError(f"Unsupported hour option: {hour!r}")
        letter = "h" if options.get("hour12") else "H"
        time_part += letter * _HOUR_WIDTH[hour]
    for name, table in _TIME_FIELDS.items():
        value = options.get(name)
        if value is None:
            continue
        if value not in table:
            raise ValueError(f"Unsupported {name} option: {value!r}")
        time_part += table[value]
    return date_part, time_part


class Formatter:
    def __init__(self, profile: FormattingProfile):
        self.profile = profile

    @classmethod
    def for_locale(cls, locale: Locale) -> "Formatter":
        return cls(profile_for(locale))

    def format_currency(self, amount) -> str:
        try:
            return numbers.format_currency(
                amount, self.profile.currency, locale=self.profile.babel_locale
            )
        except Exception:
            _log.exception("Error formatting currency %r for %s", amount, self.profile.locale)
            return _fixed_currency(self.profile.currency, amount)

    def format_datetime(self, value: date | datetime, options: Mapping | None = None) -> str:
        merged = {**DEFAULT_DATETIME_OPTIONS, **(options or {})}
        try:
            if isinstance(value, datetime):
                tz_name = merged.get("time_zone") or self.profile.timezone
                tzinfo = dates.get_timezone(tz_name)
            else:
                # A calendar date has no time of day and is never shifted between zones.
                merged.update(hour=None, minute=None, second=None)
                tzinfo = None
            date_skeleton, time_skeleton = build_skeletons(merged)
            locale = self.profile.babel_locale
            date_text = (
                dates.format_skeleton(date_skeleton, value, tzinfo=tzinfo, locale=locale)
                if date_skeleton
                else ""
            )
            time_text = (
                dates.format_skeleton(time_skeleton, value, tzinfo=tzinfo, locale=locale)
                if time_skeleton
                else ""
            )
            if date_text and time_text:
                pattern = dates.get_datetime_format("medium", locale=locale)
                return pattern.replace("'", "").replace("{0}", time_text).replace("{1}", date_text)
            if not (date_text or time_text):
                raise ValueError("No date or time fields requested")
            return date_text or time_text
        except Exception:
            _log.exception("Error formatting date/time %r for %s", value, self.profile.locale)
            return _plain_date(value)

    def format_number(self, number) -> str:
        try:
            return numbers.format_decimal(
                number, format=self.profile.number_pattern, locale=self.profile.babel_locale
            )
        except Exception:
            _log.exception("Error formatting number %r for %s", number, self.profile.locale)
            return str(number)


def _fixed_currency(code: str, amount) -> str:
    try:
        return f"{code} {float(amount):.2f}"
    except (TypeError, ValueError):
        return f"{code} {amount}"


def _plain_date(value) -> str:
    try:
        return value.isoformat()
    except Exception:
        return str(value)
