"""Header and page wrapper layout."""

import reflex as rx

from yogaswiss.ui.components.language_switcher import language_switcher
from yogaswiss.ui.state.i18n_state import I18nState

_t = I18nState.translations


def nav_link(text: rx.Var[str], href: str) -> rx.Component:
    return rx.link(rx.text(text, size="3"), href=href, underline="none")


def header() -> rx.Component:
    return rx.hstack(
        rx.heading("YogaSwiss", size="5"),
        rx.spacer(),
        nav_link(_t["nav.home"], "/"),
        nav_link(_t["nav.classes"], "/classes"),
        nav_link(_t["nav.studios"], "/studios"),
        nav_link(_t["nav.retreats"], "/retreats"),
        language_switcher(),
        spacing="4",
        align="center",
        width="100%",
        padding="12px 24px",
    )


def degraded_banner() -> rx.Component:
    return rx.cond(
        I18nState.is_degraded,
        rx.callout(_t["common.error"], icon="triangle_alert", color_scheme="orange", size="1"),
    )


def page_layout(*children: rx.Component) -> rx.Component:
    return rx.vstack(
        header(),
        degraded_banner(),
        rx.cond(
            I18nState.is_loading,
            rx.center(rx.spinner(), rx.text(_t["common.loading"]), padding="48px"),
            rx.vstack(*children, spacing="4", width="100%", padding="24px"),
        ),
        width="100%",
    )
