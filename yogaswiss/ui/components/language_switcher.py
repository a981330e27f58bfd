"""Compact language switcher for the header."""

import reflex as rx

from yogaswiss.i18n.registry import SUPPORTED_LOCALES, display_name
from yogaswiss.ui.state.i18n_state import I18nState

_t = I18nState.translations


def language_switcher() -> rx.Component:
    return rx.select.root(
        rx.select.trigger(aria_label=_t["common.language"]),
        rx.select.content(
            *[rx.select.item(display_name(loc), value=loc.value) for loc in SUPPORTED_LOCALES]
        ),
        value=I18nState.locale,
        on_change=I18nState.set_locale,
        size="1",
    )
