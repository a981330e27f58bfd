"""Landing page."""

import reflex as rx

from yogaswiss.ui.components.layout import page_layout
from yogaswiss.ui.state.i18n_state import I18nState

_t = I18nState.translations


def home_page() -> rx.Component:
    return page_layout(
        rx.heading(_t["portal.hero.title"], size="8"),
        rx.text(_t["hero.discover_studios"], size="4", color="gray"),
        rx.hstack(
            rx.input(placeholder=_t["hero.search_placeholder"], width="360px"),
            rx.button(_t["common.search"]),
            spacing="2",
        ),
        rx.link(rx.button(_t["hero.browse_classes"], variant="outline"), href="/classes"),
        rx.badge(_t["hero.swiss_made"]),
        rx.text(_t["hero.swiss_subtitle"], size="2"),
    )
