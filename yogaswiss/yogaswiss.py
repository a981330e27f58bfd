import reflex as rx

from yogaswiss.config import settings
from yogaswiss.i18n.routing import LOCALE_PREFIXES, alternate_links
from yogaswiss.ui.pages.home import home_page
from yogaswiss.ui.state.i18n_state import I18nState

app = rx.App(
    head_components=[
        rx.el.link(rel="icon", href="/favicon.ico", type="image/x-icon"),
    ],
)


def _hreflang_links(path: str) -> list[rx.Component]:
    return [rx.el.link(**link) for link in alternate_links(path, settings.site_origin)]


# The default locale is served un-prefixed, every other base locale under /<prefix>.
for _route in ["/", *(f"/{prefix}" for prefix in LOCALE_PREFIXES.values())]:
    app.add_page(
        home_page,
        route=_route,
        title=settings.app_name,
        on_load=I18nState.initialize,
        meta=_hreflang_links(_route),
    )
