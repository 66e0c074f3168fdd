"""
Reflex state management for the Storefront UI.

StoreState is the single session state behind every screen. It holds only
plain, serializable vars: navigation is rebuilt into a NavigationState on
each event and run through the router, and screen logic is delegated to
the pure modules (checkout, listing, treasury, returns, validation).

Text is rendered through the active language's Translator; the flattened
translation table is also exposed as ``texts`` for static labels.
"""

from functools import cache
from typing import Any, Generator

import reflex as rx

from storefront_ui import dashboard, returns, treasury
from storefront_ui.checkout import (
    PAYMENT_METHODS,
    Cart,
    CheckoutSession,
    step_quantity,
)
from storefront_ui.config import get_config
from storefront_ui.data import demo_records
from storefront_ui.i18n import ARABIC, ENGLISH, LanguageManager, LocaleConfig, Translator, load_translations
from storefront_ui.lib import logs
from storefront_ui.lib.storage import DiskStore
from storefront_ui.listing import (
    ALL_CATEGORIES,
    ALL_STATUSES,
    ORDERS_LISTING,
    PRODUCTS_LISTING,
    PURCHASES_LISTING,
    ListingConfig,
    empty_state,
    filter_catalog,
    filter_customers,
    filter_records,
    inventory_counts,
    inventory_value,
    invoice_detail_params,
    kpi_rows,
)
from storefront_ui.models.commerce import Contact
from storefront_ui.models.navigation import (
    AddProductSource,
    CheckoutContext,
    Flow,
    NavigationState,
    ScreenId,
)
from storefront_ui.models.reflex_models import (
    ActivityModel,
    CardModel,
    ContactModel,
    CustomerModel,
    InvoiceModel,
    InvoiceSummaryModel,
    KpiRowModel,
    LineItemModel,
    OptionModel,
    ProductModel,
    RecordModel,
    ReturnModel,
    TransactionModel,
    customer_to_model,
    invoice_summary_to_model,
    invoice_to_model,
    line_item_to_model,
    model_to_line_item,
    model_to_transaction,
    product_to_model,
    record_to_model,
    return_to_model,
    transaction_to_model,
)
from storefront_ui.router import Router
from storefront_ui.services import Collection, get_store_service
from storefront_ui.validation import (
    CategoryCatalog,
    ValidationError,
    generate_barcode,
    validate_contact,
    validate_payment_receipt,
    validate_product_form,
)

LOG = logs.logger(__file__)

LISTINGS_BY_SCREEN: dict[str, ListingConfig] = {
    ScreenId.ORDERS.value: ORDERS_LISTING,
    ScreenId.PURCHASES.value: PURCHASES_LISTING,
    ScreenId.PRODUCT_MANAGEMENT.value: PRODUCTS_LISTING,
}

_RETURN_COLLECTIONS = {
    "sales": (Collection.SALES_RETURNS, Collection.SALES_INVOICES),
    "purchase": (Collection.PURCHASE_RETURNS, Collection.PURCHASE_INVOICES),
}

_TIER_KEYS = {
    "gold": "customer.goldTier",
    "silver": "customer.silverTier",
    "bronze": "customer.bronzeTier",
    "new": "customer.newTier",
}


@cache
def _translations() -> dict[str, Any]:
    return load_translations()


@cache
def _translator(language: str) -> Translator:
    """Translator bound to a language (one per language per process)."""
    return Translator(_translations(), language)


@cache
def _preferences() -> DiskStore:
    return DiskStore(get_config().data_dir)


def _language_manager() -> LanguageManager:
    """Language manager seeded from the device language and saved preference."""
    return LanguageManager(_translator(ENGLISH), _preferences(), get_config().device_language)


def _service():
    """Get the configured store service (lazy loaded)."""
    return get_store_service()


def _options(keys, t, prefix: str = "") -> list[OptionModel]:
    return [OptionModel(key=key, label=t(f"{prefix}{key}")) for key in keys]


class StoreState(rx.State):
    """
    Main application state for the Storefront UI.

    Handles navigation, language, and the working state of every screen.
    """

    # Navigation
    current_screen: str = ScreenId.DASHBOARD.value
    previous_screen: str = ScreenId.DASHBOARD.value
    add_product_source: str = AddProductSource.PRODUCT_MANAGEMENT.value
    invoice_params: dict[str, Any] = {}
    checkout_flow: str = Flow.SALES.value
    checkout_items: list[LineItemModel] = []

    # Locale
    language: str = ENGLISH
    direction: str = "ltr"
    texts: dict[str, str] = _translator(ENGLISH).flatten()
    language_loading: bool = False

    # Alert and confirm dialogs
    alert_open: bool = False
    alert_title: str = ""
    alert_message: str = ""
    confirm_open: bool = False
    confirm_message: str = ""
    pending_remove_index: int = -1

    # Dashboard
    selected_period: str = dashboard.PERIOD_KEYS[0]
    trend_period: str = dashboard.DEFAULT_TREND_PERIOD

    # Management listings
    listing_status: str = ALL_STATUSES
    listing_query: str = ""
    kpi_expanded: bool = False

    # Customers
    customer_query: str = ""
    new_contacts: list[ContactModel] = []
    contact_dialog_open: bool = False
    contact_type: str = "customer"
    contact_name: str = ""
    contact_phone: str = ""
    contact_email: str = ""
    contact_address: str = ""

    # Sales and purchase catalogs
    catalog_category: str = ALL_CATEGORIES
    catalog_query: str = ""
    catalog_quantities: dict[str, int] = {}
    sales_cart: list[LineItemModel] = []
    purchase_cart: list[LineItemModel] = []

    # Checkout
    checkout_discount: str = ""
    checkout_paid: str = ""
    checkout_notes: str = ""
    checkout_payment_method: str = PAYMENT_METHODS[0]

    # Treasury
    treasury_tab: str = treasury.TABS[0]
    treasury_query: str = ""
    treasury_period: str = treasury.PERIODS[0]
    treasury_expanded: bool = False
    recorded_transactions: list[TransactionModel] = []
    payment_dialog_open: bool = False
    payment_type: str = "receipt"
    payment_party: str = ""
    payment_amount: str = ""
    payment_method: str = PAYMENT_METHODS[0]
    payment_notes: str = ""

    # Returns
    returns_tab: str = returns.RETURN_TYPES[0]
    returns_query: str = ""
    select_query: str = ""
    select_chips: list[str] = []

    # Add product
    product_name: str = ""
    product_description: str = ""
    product_cost: str = ""
    product_sale: str = ""
    product_lowest: str = ""
    product_quantity: str = ""
    product_barcode: str = ""
    product_category: str = ""
    extra_categories: list[str] = []
    category_dialog_open: bool = False
    new_category_name: str = ""

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _t(self, key: str, **params: Any) -> str:
        return _translator(self.language).t(key, **params)

    def _navigation(self) -> NavigationState:
        """Rebuild the router snapshot from the session vars."""
        screen = ScreenId(self.current_screen)
        checkout = None
        if screen is ScreenId.CHECKOUT:
            checkout = CheckoutContext(
                cart=tuple(model_to_line_item(item) for item in self.checkout_items),
                flow=Flow(self.checkout_flow),
            )
        return NavigationState(
            current_screen=screen,
            checkout=checkout,
            invoice_detail_params=(
                dict(self.invoice_params) if screen is ScreenId.INVOICE_DETAIL else None
            ),
            previous_screen=ScreenId(self.previous_screen),
            add_product_source=AddProductSource(self.add_product_source),
        )

    def _router(self) -> Router:
        return Router(self._navigation(), translate=self._t)

    def _store_navigation(self, nav: NavigationState) -> None:
        """Write a router snapshot back into the session vars."""
        changed = nav.current_screen.value != self.current_screen
        self.current_screen = nav.current_screen.value
        self.previous_screen = nav.previous_screen.value
        self.add_product_source = nav.add_product_source.value
        self.invoice_params = dict(nav.invoice_detail_params or {})
        if nav.checkout is not None:
            self.checkout_flow = nav.checkout.flow.value
            self.checkout_items = [line_item_to_model(item) for item in nav.checkout.cart]
        else:
            self.checkout_items = []
        if changed:
            self._reset_screen_fields()

    def _reset_screen_fields(self) -> None:
        """Screens start from their initial filters; unsaved forms are dropped."""
        self.listing_status = ALL_STATUSES
        self.listing_query = ""
        self.kpi_expanded = False
        self.customer_query = ""
        self.contact_dialog_open = False
        self.catalog_category = ALL_CATEGORIES
        self.catalog_query = ""
        self.catalog_quantities = {}
        self.checkout_discount = ""
        self.checkout_paid = ""
        self.checkout_notes = ""
        self.checkout_payment_method = PAYMENT_METHODS[0]
        self.confirm_open = False
        self.pending_remove_index = -1
        self.treasury_tab = treasury.TABS[0]
        self.treasury_query = ""
        self.payment_dialog_open = False
        self.returns_query = ""
        self.select_query = ""
        self._clear_product_form()

    def _clear_product_form(self) -> None:
        self.product_name = ""
        self.product_description = ""
        self.product_cost = ""
        self.product_sale = ""
        self.product_lowest = ""
        self.product_quantity = ""
        self.product_barcode = ""
        self.product_category = ""
        self.category_dialog_open = False
        self.new_category_name = ""

    def _apply_locale(self, locale: LocaleConfig) -> None:
        self.language = locale.language
        self.direction = locale.direction
        self.texts = locale.translator.flatten()

    def _show_alert(self, title_key: str, message: str) -> None:
        self.alert_title = self._t(title_key)
        self.alert_message = message
        self.alert_open = True

    def _show_error(self, error: ValidationError) -> None:
        LOG.info("Validation failed: %s", error.message_key)
        self._show_alert("common.error", error.message(self._t))

    def _listing(self) -> ListingConfig:
        return LISTINGS_BY_SCREEN.get(self.current_screen, ORDERS_LISTING)

    def _catalog_flow(self) -> Flow:
        if self.current_screen == ScreenId.PURCHASE_PRODUCT.value:
            return Flow.PURCHASE
        return Flow.SALES

    def _catalog_collection(self) -> Collection:
        if self._catalog_flow() is Flow.PURCHASE:
            return Collection.PURCHASE_CATALOG
        return Collection.SALES_CATALOG

    def _flow_cart(self) -> list[LineItemModel]:
        if self._catalog_flow() is Flow.PURCHASE:
            return self.purchase_cart
        return self.sales_cart

    def _checkout_session(self) -> CheckoutSession:
        session = CheckoutSession(
            [model_to_line_item(item) for item in self.checkout_items],
            tax_rate=get_config().tax_rate,
        )
        session.select_payment_method(self.checkout_payment_method)
        session.discount = self.checkout_discount
        session.paid_amount = self.checkout_paid
        session.notes = self.checkout_notes
        return session

    # ------------------------------------------------------------------
    # Page load and language
    # ------------------------------------------------------------------

    @rx.event
    def on_load(self):
        """Apply the device language and any saved preference."""
        manager = _language_manager()
        self._apply_locale(manager.locale)
        LOG.info("on_load - language:%s screen:%s", self.language, self.current_screen)

    @rx.event
    def change_language(self, language: str) -> Generator:
        """
        Switch the UI language and persist the choice.

        Yields once so the loading overlay shows while the change runs.
        """
        if language == self.language:
            return
        self.language_loading = True
        yield
        try:
            manager = _language_manager()
            self._apply_locale(manager.change_language(language))
        except ValueError:
            LOG.warning("Ignoring unsupported language: %s", language)
        finally:
            self.language_loading = False

    @rx.event
    def toggle_language(self):
        return StoreState.change_language(ARABIC if self.language == ENGLISH else ENGLISH)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @rx.event
    def navigate_to(self, screen: str):
        router = self._router()
        router.navigate_to(screen)
        self._store_navigation(router.state)

    @rx.event
    def on_back(self):
        router = self._router()
        router.on_back()
        self._store_navigation(router.state)

    @rx.event
    def go_home(self):
        router = self._router()
        router.go_home()
        self._store_navigation(router.state)

    @rx.event
    def handle_menu_press(self):
        router = self._router()
        router.handle_menu_press()
        self._store_navigation(router.state)

    @rx.event
    def handle_card_press(self, title: str):
        router = self._router()
        if router.handle_card_press(title):
            self._store_navigation(router.state)

    @rx.event
    def open_add_product(self, source: str):
        router = self._router()
        router.open_add_product(source)
        self._store_navigation(router.state)

    @rx.event
    def navigate_to_checkout(self):
        """Open checkout with the current catalog's cart."""
        flow = self._catalog_flow()
        router = self._router()
        router.navigate_to_checkout(
            [model_to_line_item(item) for item in self._flow_cart()], flow
        )
        self._store_navigation(router.state)

    @rx.event
    def open_invoice(self, record_id: str):
        """Open the invoice detail of a pressed order or purchase."""
        config = self._listing()
        record = _service().get(config.collection, record_id)
        if record is None:
            LOG.warning("Record not found - collection:%s id:%s", config.collection, record_id)
            return
        router = self._router()
        router.navigate_to(ScreenId.INVOICE_DETAIL, invoice_detail_params(config, record))
        self._store_navigation(router.state)

    @rx.event
    def open_return_invoice(self, return_id: str):
        """Open the original invoice of a return."""
        returns_collection, _ = _RETURN_COLLECTIONS[self.returns_tab]
        record = _service().get(returns_collection, return_id)
        if record is None:
            LOG.warning("Return not found: %s", return_id)
            return
        router = self._router()
        router.navigate_to(
            ScreenId.INVOICE_DETAIL, returns.original_invoice_params(record, self.returns_tab)
        )
        self._store_navigation(router.state)

    @rx.event
    def start_return(self):
        """Open the invoice picker with the return type's default chips."""
        router = self._router()
        router.navigate_to(ScreenId.SELECT_INVOICE)
        self._store_navigation(router.state)
        self.select_chips = returns.default_chips(self.returns_tab)

    @rx.event
    def open_return_candidate(self, invoice_id: str):
        _, invoices_collection = _RETURN_COLLECTIONS[self.returns_tab]
        invoice = _service().get(invoices_collection, invoice_id)
        if invoice is None:
            LOG.warning("Invoice not found: %s", invoice_id)
            return
        router = self._router()
        router.navigate_to(
            ScreenId.INVOICE_DETAIL, returns.candidate_params(invoice, self.returns_tab)
        )
        self._store_navigation(router.state)

    # ------------------------------------------------------------------
    # Alerts
    # ------------------------------------------------------------------

    @rx.event
    def close_alert(self):
        self.alert_open = False

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    @rx.event
    def set_selected_period(self, period: str):
        self.selected_period = period

    @rx.event
    def set_trend_period(self, period: str):
        self.trend_period = period

    @rx.var
    def greeting(self) -> str:
        return _translator(self.language).t("dashboard.goodMorning", name=dashboard.USER_NAME)

    @rx.var
    def dashboard_cards(self) -> list[CardModel]:
        t = _translator(self.language)
        return [CardModel(**card) for card in dashboard.render_cards(t)]

    @rx.var
    def recent_activities(self) -> list[ActivityModel]:
        t = _translator(self.language)
        return [ActivityModel(**activity) for activity in dashboard.render_activities(t)]

    @rx.var
    def period_options(self) -> list[OptionModel]:
        return _options(dashboard.PERIOD_KEYS, _translator(self.language))

    @rx.var
    def trend_period_options(self) -> list[OptionModel]:
        return _options(dashboard.TREND_PERIOD_KEYS, _translator(self.language))

    @rx.var
    def goal_percentage(self) -> int:
        return dashboard.SALES_GOAL.percentage

    @rx.var
    def goal_text(self) -> str:
        goal = dashboard.SALES_GOAL
        return f"${goal.current:,.0f} / ${goal.target:,.0f}"

    @rx.var
    def sales_trend_value(self) -> str:
        return dashboard.SALES_TREND_VALUE

    # ------------------------------------------------------------------
    # Management listings (orders, purchases, products)
    # ------------------------------------------------------------------

    @rx.event
    def set_listing_status(self, status: str):
        self.listing_status = status

    @rx.event
    def set_listing_query(self, query: str):
        self.listing_query = query

    @rx.event
    def toggle_kpi(self):
        self.kpi_expanded = not self.kpi_expanded

    @rx.var
    def listing_title(self) -> str:
        config = LISTINGS_BY_SCREEN.get(self.current_screen, ORDERS_LISTING)
        return _translator(self.language).t(config.translations.title_key)

    @rx.var
    def listing_search_placeholder(self) -> str:
        config = LISTINGS_BY_SCREEN.get(self.current_screen, ORDERS_LISTING)
        return _translator(self.language).t(config.translations.search_placeholder_key)

    @rx.var
    def listing_status_options(self) -> list[OptionModel]:
        config = LISTINGS_BY_SCREEN.get(self.current_screen, ORDERS_LISTING)
        t = _translator(self.language)
        return [
            OptionModel(key=status, label=t(config.status_key(status)))
            for status in config.status_options
        ]

    @rx.var
    def listing_rows(self) -> list[RecordModel]:
        """Order or purchase rows after the status chip and search."""
        config = LISTINGS_BY_SCREEN.get(self.current_screen)
        if config is None or not config.is_invoice_related:
            return []
        t = _translator(self.language)
        records = filter_records(
            _service().list(config.collection), config, self.listing_status, self.listing_query
        )
        rows = []
        for record in records:
            row = record_to_model(record, self.language)
            row.status_label = t(config.status_key(record.status))
            rows.append(row)
        return rows

    @rx.var
    def product_rows(self) -> list[ProductModel]:
        if self.current_screen != ScreenId.PRODUCT_MANAGEMENT.value:
            return []
        t = _translator(self.language)
        records = filter_records(
            _service().list(PRODUCTS_LISTING.collection),
            PRODUCTS_LISTING,
            self.listing_status,
            self.listing_query,
        )
        rows = []
        for product in records:
            row = product_to_model(product)
            row.status_label = t(f"products.stockStatus.{product.status}")
            rows.append(row)
        return rows

    @rx.var
    def listing_is_empty(self) -> bool:
        if self.current_screen == ScreenId.PRODUCT_MANAGEMENT.value:
            return len(self.product_rows) == 0
        return len(self.listing_rows) == 0

    @rx.var
    def listing_empty_title(self) -> str:
        config = LISTINGS_BY_SCREEN.get(self.current_screen, ORDERS_LISTING)
        state = empty_state(config, self.listing_query)
        return _translator(self.language).t(state.title_key)

    @rx.var
    def listing_empty_message(self) -> str:
        config = LISTINGS_BY_SCREEN.get(self.current_screen, ORDERS_LISTING)
        state = empty_state(config, self.listing_query)
        return _translator(self.language).t(state.message_key)

    @rx.var
    def listing_kpis(self) -> list[KpiRowModel]:
        """KPI rows; the first row is the card's headline."""
        config = LISTINGS_BY_SCREEN.get(self.current_screen)
        if config is None or not config.is_invoice_related:
            return []
        kpi = _service().kpis(config.collection)
        if kpi is None:
            return []
        t = _translator(self.language)
        return [
            KpiRowModel(label=t(row.label_key), value=str(row.value), tone=row.tone)
            for row in kpi_rows(kpi, config.translations.kpi_prefix)
        ]

    @rx.var
    def listing_kpi_headline(self) -> KpiRowModel:
        rows = self.listing_kpis
        return rows[0] if rows else KpiRowModel()

    @rx.var
    def listing_kpi_details(self) -> list[KpiRowModel]:
        return self.listing_kpis[1:]

    @rx.var
    def listing_kpi_period(self) -> str:
        config = LISTINGS_BY_SCREEN.get(self.current_screen)
        if config is None or not config.is_invoice_related:
            return ""
        kpi = _service().kpis(config.collection)
        return kpi.period if kpi is not None else ""

    @rx.var
    def inventory_total_value(self) -> str:
        return inventory_value(_service().list(Collection.INVENTORY))

    @rx.var
    def inventory_total_items(self) -> int:
        return len(_service().list(Collection.INVENTORY))

    @rx.var
    def top_selling(self) -> list[KpiRowModel]:
        units = _translator(self.language).t("products.inventory.unitsSold")
        return [
            KpiRowModel(label=name, value=f"{count} {units}")
            for name, count in demo_records.TOP_SELLING
        ]

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    @rx.event
    def set_customer_query(self, query: str):
        self.customer_query = query

    @rx.event
    def open_contact_dialog(self, contact_type: str):
        self.contact_type = contact_type
        self.contact_name = ""
        self.contact_phone = ""
        self.contact_email = ""
        self.contact_address = ""
        self.contact_dialog_open = True

    @rx.event
    def close_contact_dialog(self):
        self.contact_dialog_open = False

    @rx.event
    def set_contact_name(self, value: str):
        self.contact_name = value

    @rx.event
    def set_contact_phone(self, value: str):
        self.contact_phone = value

    @rx.event
    def set_contact_email(self, value: str):
        self.contact_email = value

    @rx.event
    def set_contact_address(self, value: str):
        self.contact_address = value

    @rx.event
    def save_contact(self):
        """Validate the contact dialog and add the contact to the session list."""
        try:
            contact: Contact = validate_contact(
                {
                    "name": self.contact_name,
                    "type": self.contact_type,
                    "phone": self.contact_phone,
                    "email": self.contact_email,
                    "address": self.contact_address,
                }
            )
        except ValidationError as exc:
            self._show_error(exc)
            return
        self.new_contacts = [
            ContactModel(
                name=contact.name,
                type=contact.type,
                phone=contact.phone,
                email=contact.email,
                address=contact.address,
            ),
            *self.new_contacts,
        ]
        self.contact_dialog_open = False
        LOG.info("Added %s contact: %s", contact.type, contact.name)

    @rx.var
    def customer_rows(self) -> list[CustomerModel]:
        t = _translator(self.language)
        rows = []
        for customer in filter_customers(_service().list(Collection.CUSTOMERS), self.customer_query):
            row = customer_to_model(customer)
            row.tier_label = t(_TIER_KEYS.get(customer.tier, "customer.newTier"))
            rows.append(row)
        return rows

    @rx.var
    def customer_kpis(self) -> list[KpiRowModel]:
        t = _translator(self.language)
        return [KpiRowModel(label=t(key), value=value) for key, value in demo_records.CUSTOMERS_KPI]

    @rx.var
    def new_customers_count(self) -> int:
        return demo_records.NEW_CUSTOMERS_THIS_MONTH

    # ------------------------------------------------------------------
    # Sales and purchase catalogs
    # ------------------------------------------------------------------

    @rx.event
    def set_catalog_category(self, category: str):
        self.catalog_category = category

    @rx.event
    def set_catalog_query(self, query: str):
        self.catalog_query = query

    @rx.event
    def step_catalog_quantity(self, product_id: int, delta: int):
        key = str(product_id)
        quantities = dict(self.catalog_quantities)
        quantities[key] = step_quantity(quantities.get(key, 1), delta)
        self.catalog_quantities = quantities

    @rx.event
    def add_to_cart(self, product_id: int):
        """Add the selected quantity of a catalog product to the flow's cart."""
        product = _service().get(self._catalog_collection(), product_id)
        if product is None:
            LOG.warning("Catalog product not found: %s", product_id)
            return
        key = str(product_id)
        quantity = self.catalog_quantities.get(key, 1)
        cart = Cart([model_to_line_item(item) for item in self._flow_cart()])
        cart.add(product, quantity)
        items = [line_item_to_model(item) for item in cart.items]
        if self._catalog_flow() is Flow.PURCHASE:
            self.purchase_cart = items
        else:
            self.sales_cart = items
        quantities = dict(self.catalog_quantities)
        quantities.pop(key, None)
        self.catalog_quantities = quantities
        self._show_alert(
            "sales.addedToCart",
            self._t("sales.addedToCartMessage", quantity=quantity, productName=product.name),
        )

    @rx.var
    def catalog_title(self) -> str:
        key = "purchase.title" if self.current_screen == ScreenId.PURCHASE_PRODUCT.value else "sales.title"
        return _translator(self.language).t(key)

    @rx.var
    def catalog_category_options(self) -> list[OptionModel]:
        collection = (
            Collection.PURCHASE_CATALOG
            if self.current_screen == ScreenId.PURCHASE_PRODUCT.value
            else Collection.SALES_CATALOG
        )
        return _options(_service().categories(collection), _translator(self.language), "categories.")

    @rx.var
    def catalog_rows(self) -> list[ProductModel]:
        purchase = self.current_screen == ScreenId.PURCHASE_PRODUCT.value
        collection = Collection.PURCHASE_CATALOG if purchase else Collection.SALES_CATALOG
        products = filter_catalog(
            _service().list(collection),
            self.catalog_category,
            self.catalog_query,
            Flow.PURCHASE if purchase else Flow.SALES,
        )
        rows = []
        for product in products:
            row = product_to_model(product)
            row.quantity = self.catalog_quantities.get(str(product.id), 1)
            rows.append(row)
        return rows

    @rx.var
    def cart_count(self) -> int:
        purchase = self.current_screen == ScreenId.PURCHASE_PRODUCT.value
        items = self.purchase_cart if purchase else self.sales_cart
        return sum(item.quantity for item in items)

    @rx.var
    def cart_count_label(self) -> str:
        purchase = self.current_screen == ScreenId.PURCHASE_PRODUCT.value
        items = self.purchase_cart if purchase else self.sales_cart
        count = sum(item.quantity for item in items)
        return _translator(self.language).t("sales.cartItems", count=count)

    @rx.var
    def low_stock_message(self) -> str:
        counts = inventory_counts(_service().list(Collection.INVENTORY))
        return _translator(self.language).t("purchase.lowStockAlert", count=counts["low_stock"])

    @rx.var
    def out_of_stock_message(self) -> str:
        counts = inventory_counts(_service().list(Collection.INVENTORY))
        return _translator(self.language).t("purchase.outOfStockAlert", count=counts["out_of_stock"])

    # ------------------------------------------------------------------
    # Checkout
    # ------------------------------------------------------------------

    @rx.event
    def set_checkout_discount(self, value: str):
        self.checkout_discount = value

    @rx.event
    def set_checkout_paid(self, value: str):
        self.checkout_paid = value

    @rx.event
    def set_checkout_notes(self, value: str):
        self.checkout_notes = value

    @rx.event
    def select_payment_method(self, method: str):
        session = self._checkout_session()
        session.select_payment_method(method)
        self.checkout_payment_method = session.payment_method

    @rx.event
    def change_checkout_quantity(self, index: int, delta: int):
        session = self._checkout_session()
        if index < len(session.items):
            session.update_quantity(index, session.items[index].quantity + delta)
        self.checkout_items = [line_item_to_model(item) for item in session.items]

    @rx.event
    def request_remove_item(self, index: int):
        """Ask before removing a line from the checkout cart."""
        if not 0 <= index < len(self.checkout_items):
            return
        self.pending_remove_index = index
        self.confirm_message = self._t(
            "checkout.removeItem", name=self.checkout_items[index].name
        )
        self.confirm_open = True

    @rx.event
    def confirm_remove_item(self):
        session = self._checkout_session()
        session.remove_item(self.pending_remove_index, lambda item: True)
        self.checkout_items = [line_item_to_model(item) for item in session.items]
        self.pending_remove_index = -1
        self.confirm_open = False

    @rx.event
    def cancel_remove_item(self):
        self.pending_remove_index = -1
        self.confirm_open = False

    @rx.event
    def place_order(self):
        """
        Place the order and hand it back to the screen that opened checkout.

        The flow's cart is emptied once the order is accepted.
        """
        session = self._checkout_session()
        try:
            order = session.place_order()
        except ValidationError as exc:
            self._show_error(exc)
            return
        router = self._router()
        order = router.complete_checkout(order)
        self._store_navigation(router.state)
        if order["flow"] == Flow.PURCHASE.value:
            self.purchase_cart = []
        else:
            self.sales_cart = []
        LOG.info("Order placed - flow:%s total:%.2f", order["flow"], order["total"])
        self._show_alert(
            "common.success",
            self._t("checkout.orderPlaced", total=f"{order['total']:.2f}"),
        )

    @rx.var
    def payment_method_options(self) -> list[OptionModel]:
        return _options(PAYMENT_METHODS, _translator(self.language), "checkout.paymentMethods.")

    @rx.var
    def checkout_summary(self) -> dict[str, str]:
        """Formatted subtotal, discount, tax and total of the checkout cart."""
        session = CheckoutSession(
            [model_to_line_item(item) for item in self.checkout_items],
            tax_rate=get_config().tax_rate,
        )
        session.discount = self.checkout_discount
        totals = session.totals
        rate = get_config().tax_rate * 100
        return {
            "subtotal": f"{totals.subtotal:.2f}",
            "discount": f"-{totals.discount:.2f}",
            "tax": f"{totals.tax:.2f}",
            "total": f"{totals.total:.2f}",
            "tax_label": _translator(self.language).t("checkout.tax", rate=f"{rate:g}"),
        }

    # ------------------------------------------------------------------
    # Treasury
    # ------------------------------------------------------------------

    @rx.event
    def set_treasury_tab(self, tab: str):
        self.treasury_tab = tab

    @rx.event
    def set_treasury_query(self, query: str):
        self.treasury_query = query

    @rx.event
    def set_treasury_period(self, period: str):
        self.treasury_period = period

    @rx.event
    def toggle_treasury_details(self):
        self.treasury_expanded = not self.treasury_expanded

    @rx.event
    def open_payment_dialog(self, payment_type: str):
        self.payment_type = payment_type
        self.payment_party = ""
        self.payment_amount = ""
        self.payment_method = PAYMENT_METHODS[0]
        self.payment_notes = ""
        self.payment_dialog_open = True

    @rx.event
    def close_payment_dialog(self):
        self.payment_dialog_open = False

    @rx.event
    def set_payment_party(self, value: str):
        self.payment_party = value

    @rx.event
    def set_payment_amount(self, value: str):
        self.payment_amount = value

    @rx.event
    def set_payment_method(self, value: str):
        self.payment_method = value

    @rx.event
    def set_payment_notes(self, value: str):
        self.payment_notes = value

    @rx.event
    def save_payment(self):
        """Validate the payment/receipt dialog and record the transaction."""
        try:
            draft = validate_payment_receipt(
                {
                    "type": self.payment_type,
                    "party_name": self.payment_party,
                    "amount": self.payment_amount,
                    "payment_method": self.payment_method,
                    "notes": self.payment_notes,
                }
            )
        except ValidationError as exc:
            self._show_error(exc)
            return
        ledger = treasury.TreasuryLedger(
            [model_to_transaction(model) for model in self.recorded_transactions]
        )
        transaction = ledger.record(draft)
        self.recorded_transactions = [
            transaction_to_model(txn, txn.title) for txn in ledger.transactions
        ]
        self.payment_dialog_open = False
        self._show_alert("common.success", self._t("treasury.saved"))
        LOG.debug("Recorded %s, ledger size: %s", transaction.id, len(ledger.transactions))

    @rx.var
    def treasury_tab_options(self) -> list[OptionModel]:
        return _options(treasury.TABS, _translator(self.language), "treasury.transactions.")

    @rx.var
    def treasury_period_options(self) -> list[OptionModel]:
        return _options(treasury.PERIODS, _translator(self.language))

    @rx.var
    def transaction_rows(self) -> list[TransactionModel]:
        t = _translator(self.language)
        ledger = [model_to_transaction(model) for model in self.recorded_transactions]
        ledger.extend(_service().list(Collection.TRANSACTIONS))
        return [
            transaction_to_model(txn, t(txn.title))
            for txn in treasury.filter_transactions(
                ledger, self.treasury_tab, self.treasury_query, translate=t
            )
        ]

    @rx.var
    def treasury_figures(self) -> dict[str, str]:
        summary = _service().treasury_summary()
        return {
            "current_balance": summary.current_balance,
            "today_net_flow": summary.today_net_flow,
            "today_receipts": summary.today_receipts,
            "today_payments": summary.today_payments,
            "total_receipts": summary.total_receipts,
            "total_payments": summary.total_payments,
            "total_receivables": summary.total_receivables,
            "total_payables": summary.total_payables,
        }

    # ------------------------------------------------------------------
    # Returns
    # ------------------------------------------------------------------

    @rx.event
    def set_returns_tab(self, tab: str):
        if tab not in returns.RETURN_TYPES:
            raise ValueError(f"Unknown return type: {tab}")
        self.returns_tab = tab
        self.returns_query = ""

    @rx.event
    def set_returns_query(self, query: str):
        self.returns_query = query

    @rx.event
    def set_select_query(self, query: str):
        self.select_query = query

    @rx.event
    def remove_select_chip(self, chip: str):
        self.select_chips = returns.remove_chip(self.select_chips, chip)

    @rx.var
    def returns_tab_options(self) -> list[OptionModel]:
        return _options(returns.RETURN_TYPES, _translator(self.language), "returns.")

    @rx.var
    def return_rows(self) -> list[ReturnModel]:
        t = _translator(self.language)
        returns_collection, _ = _RETURN_COLLECTIONS[self.returns_tab]
        rows = []
        for record in returns.filter_returns(_service().list(returns_collection), self.returns_query):
            row = return_to_model(record, self.language)
            row.status_label = t(returns.STATUS_KEYS.get(record.status, record.status))
            rows.append(row)
        return rows

    @rx.var
    def candidate_rows(self) -> list[InvoiceSummaryModel]:
        t = _translator(self.language)
        _, invoices_collection = _RETURN_COLLECTIONS[self.returns_tab]
        rows = []
        for invoice in returns.filter_return_candidates(
            _service().list(invoices_collection), self.select_query, self.select_chips
        ):
            row = invoice_summary_to_model(invoice, self.language)
            row.status_label = t(returns.STATUS_KEYS.get(invoice.status, invoice.status))
            rows.append(row)
        return rows

    # ------------------------------------------------------------------
    # Invoice detail
    # ------------------------------------------------------------------

    @rx.var
    def invoice(self) -> InvoiceModel:
        if self.current_screen != ScreenId.INVOICE_DETAIL.value:
            return InvoiceModel()
        document = _service().invoice_document(self.invoice_params)
        t = _translator(self.language)
        model = invoice_to_model(document, self.language)
        prefix = "purchases" if document.invoice_type == "purchase" else "orders"
        status_key = f"{prefix}.{document.order_status}"
        if not t.has(status_key):
            # invoices picked for a return carry a payment status
            status_key = returns.STATUS_KEYS.get(document.order_status, document.order_status)
        model.order_status = t(status_key)
        model.payment_status = t(
            returns.STATUS_KEYS.get(document.payment_status, document.payment_status)
        )
        return model

    @rx.var
    def invoice_title(self) -> str:
        kind = self.invoice_params.get("invoice_type") or "sales"
        return _translator(self.language).t(f"invoice.{kind}")

    @rx.var
    def invoice_party_label(self) -> str:
        kind = self.invoice_params.get("invoice_type") or "sales"
        return _translator(self.language).t(
            "invoice.vendor" if kind == "purchase" else "invoice.customer"
        )

    # ------------------------------------------------------------------
    # Add product
    # ------------------------------------------------------------------

    @rx.event
    def set_product_name(self, value: str):
        self.product_name = value

    @rx.event
    def set_product_description(self, value: str):
        self.product_description = value

    @rx.event
    def set_product_cost(self, value: str):
        self.product_cost = value

    @rx.event
    def set_product_sale(self, value: str):
        self.product_sale = value

    @rx.event
    def set_product_lowest(self, value: str):
        self.product_lowest = value

    @rx.event
    def set_product_quantity(self, value: str):
        self.product_quantity = value

    @rx.event
    def set_product_barcode(self, value: str):
        self.product_barcode = value

    @rx.event
    def set_product_category(self, value: str):
        self.product_category = value

    @rx.event
    def generate_product_barcode(self):
        self.product_barcode = generate_barcode()

    @rx.event
    def open_category_dialog(self):
        self.new_category_name = ""
        self.category_dialog_open = True

    @rx.event
    def close_category_dialog(self):
        self.category_dialog_open = False

    @rx.event
    def set_new_category_name(self, value: str):
        self.new_category_name = value

    @rx.event
    def save_new_category(self):
        """Add a category (case-insensitive duplicates rejected) and select it."""
        catalog = CategoryCatalog.from_names(self.product_category_options)
        try:
            name = catalog.add_category(self.new_category_name)
        except ValidationError as exc:
            self._show_error(exc)
            return
        self.extra_categories = [*self.extra_categories, name]
        self.product_category = name
        self.category_dialog_open = False
        self._show_alert(
            "common.success", self._t("products.addProduct.category.categoryAddedSuccess")
        )

    @rx.event
    def save_product(self):
        """Validate the add-product form and return to the screen that opened it."""
        try:
            draft = validate_product_form(
                {
                    "name": self.product_name,
                    "description": self.product_description,
                    "cost_price": self.product_cost,
                    "sale_price": self.product_sale,
                    "category": self.product_category,
                    "lowest_sell_price": self.product_lowest,
                    "opening_quantity": self.product_quantity,
                    "barcode": self.product_barcode,
                }
            )
        except ValidationError as exc:
            self._show_error(exc)
            return
        LOG.info("Saving product: %s (%s)", draft.name, draft.category)
        router = self._router()
        router.on_back()
        self._store_navigation(router.state)
        self._show_alert("common.success", self._t("products.addProduct.successMessage"))

    @rx.var
    def product_category_options(self) -> list[str]:
        t = _translator(self.language)
        return [t(key) for key in demo_records.PRODUCT_CATEGORY_KEYS] + list(self.extra_categories)
