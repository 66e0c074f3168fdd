"""
Reflex application entry point for the Storefront UI.

This module initializes the Reflex app and renders the one screen the
router currently shows.
"""

import reflex as rx

from storefront_ui import components
from storefront_ui.config import get_config
from storefront_ui.lib import logs
from storefront_ui.models.navigation import ScreenId
from storefront_ui.state import StoreState

LOG = logs.logger(__file__)

APP_TITLE = "Storefront"

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&family=Noto+Sans+Arabic:wght@400;500;600;700&display=swap"


def current_screen() -> rx.Component:
    """Render the screen matching StoreState.current_screen."""
    return rx.match(
        StoreState.current_screen,
        (ScreenId.CUSTOMERS.value, components.customers_screen()),
        (ScreenId.ORDERS.value, components.orders_screen()),
        (ScreenId.PURCHASES.value, components.purchases_screen()),
        (ScreenId.PRODUCT_MANAGEMENT.value, components.products_screen()),
        (ScreenId.ADD_PRODUCT.value, components.add_product_screen()),
        (ScreenId.SALES.value, components.sales_screen()),
        (ScreenId.PURCHASE_PRODUCT.value, components.purchase_screen()),
        (ScreenId.TREASURY.value, components.treasury_screen()),
        (ScreenId.RETURNS.value, components.returns_screen()),
        (ScreenId.SELECT_INVOICE.value, components.select_invoice_screen()),
        (ScreenId.INVOICE_DETAIL.value, components.invoice_detail_screen()),
        (ScreenId.CHECKOUT.value, components.checkout_screen()),
        components.dashboard_screen(),
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The app shell with the active screen and the global dialogs.
    """
    return rx.el.div(
        rx.box(
            current_screen(),
            class_name="app-container",
        ),
        components.alert_dialog(),
        components.confirm_dialog(),
        components.loading_overlay(),
        dir=StoreState.direction,
        lang=StoreState.language,
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

# Add the index page
app.add_page(
    index,
    title=APP_TITLE,
    on_load=StoreState.on_load,
)


def main() -> None:
    """Entrypoint for the `storefront-ui` script; runs `reflex run`."""
    import subprocess
    import sys

    port = get_config().port
    LOG.info("Starting Storefront UI on port %s", port)
    subprocess.run([sys.executable, "-m", "reflex", "run", "--backend-port", str(port)])


if __name__ == "__main__":
    main()
