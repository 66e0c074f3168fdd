"""Tests for form validation."""

from __future__ import annotations

import random

import pytest

from storefront_ui.validation import (
    CategoryCatalog,
    ValidationError,
    generate_barcode,
    validate_contact,
    validate_payment_receipt,
    validate_product_form,
)

VALID_PRODUCT = {
    "name": "Desk Lamp",
    "description": "LED lamp",
    "cost_price": "12.50",
    "sale_price": "19.99",
    "category": "electronics",
}


# ---------------------------------------------------------------------------
# Add product
# ---------------------------------------------------------------------------


def test_valid_product_form():
    draft = validate_product_form({**VALID_PRODUCT, "barcode": " 123 "})
    assert draft.name == "Desk Lamp"
    assert draft.cost_price == pytest.approx(12.5)
    assert draft.sale_price == pytest.approx(19.99)
    assert draft.lowest_sell_price == 0.0
    assert draft.opening_quantity == 0
    assert draft.barcode == "123"


def test_optional_numbers_parse_leniently():
    draft = validate_product_form(
        {**VALID_PRODUCT, "lowest_sell_price": "oops", "opening_quantity": "1,200"}
    )
    assert draft.lowest_sell_price == 0.0
    assert draft.opening_quantity == 1200


@pytest.mark.parametrize(
    "overrides, key",
    [
        ({"name": "  "}, "products.addProduct.validation.nameRequired"),
        ({"description": ""}, "products.addProduct.validation.descriptionRequired"),
        ({"cost_price": "0"}, "products.addProduct.validation.costPriceRequired"),
        ({"cost_price": "abc"}, "products.addProduct.validation.costPriceRequired"),
        ({"cost_price": "inf"}, "products.addProduct.validation.costPriceRequired"),
        ({"sale_price": "nan"}, "products.addProduct.validation.salePriceRequired"),
        ({"sale_price": "-1"}, "products.addProduct.validation.salePriceRequired"),
        ({"category": None}, "products.addProduct.validation.categoryRequired"),
    ],
)
def test_product_form_errors(overrides, key):
    with pytest.raises(ValidationError) as excinfo:
        validate_product_form({**VALID_PRODUCT, **overrides})
    assert excinfo.value.message_key == key


def test_product_form_reports_first_failure_in_screen_order():
    with pytest.raises(ValidationError) as excinfo:
        validate_product_form({})
    assert excinfo.value.message_key == "products.addProduct.validation.nameRequired"


def test_validation_message_uses_translator(translator):
    error = ValidationError("products.addProduct.validation.nameRequired")
    assert error.message(translator.t) == translator.t(
        "products.addProduct.validation.nameRequired"
    )


def test_barcode_is_thirteen_digits():
    barcode = generate_barcode(random.Random(7))
    assert len(barcode) == 13
    assert barcode.isdigit()
    assert generate_barcode(random.Random(7)) == barcode


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def test_add_category_trims_and_appends():
    catalog = CategoryCatalog(["Electronics"])
    assert catalog.add_category("  Garden ") == "Garden"
    assert catalog.categories == ["Electronics", "Garden"]


def test_add_category_rejects_blank():
    with pytest.raises(ValidationError) as excinfo:
        CategoryCatalog().add_category("   ")
    assert excinfo.value.message_key == "products.addProduct.category.categoryRequired"


def test_add_category_rejects_duplicates_case_insensitively():
    catalog = CategoryCatalog.from_names(["Electronics"])
    with pytest.raises(ValidationError) as excinfo:
        catalog.add_category("electronics")
    assert excinfo.value.message_key == "products.addProduct.category.categoryExists"
    assert catalog.categories == ["Electronics"]


# ---------------------------------------------------------------------------
# Contacts and payments
# ---------------------------------------------------------------------------


def test_contact_requires_name():
    with pytest.raises(ValidationError) as excinfo:
        validate_contact({"name": " "})
    assert excinfo.value.message_key == "customer.nameRequired"


def test_contact_defaults_to_customer():
    contact = validate_contact({"name": "Sara", "phone": " 0555 "})
    assert contact.type == "customer"
    assert contact.phone == "0555"


def test_contact_rejects_unknown_type():
    with pytest.raises(ValueError):
        validate_contact({"name": "Sara", "type": "partner"})


def test_payment_receipt_valid():
    draft = validate_payment_receipt(
        {"party_name": "ABC Supplies", "amount": "1,250", "type": "payment"}
    )
    assert draft.amount == pytest.approx(1250.0)
    assert draft.type == "payment"
    assert draft.payment_method == "cash"


@pytest.mark.parametrize(
    "form, key",
    [
        ({"party_name": "", "amount": "10"}, "customer.nameRequired"),
        ({"party_name": "A", "amount": "0"}, "validation.required"),
        ({"party_name": "A", "amount": "ten"}, "validation.required"),
        ({"party_name": "A", "amount": "nan"}, "validation.required"),
        ({"party_name": "A", "amount": "inf"}, "validation.required"),
        ({"party_name": "A"}, "validation.required"),
    ],
)
def test_payment_receipt_errors(form, key):
    with pytest.raises(ValidationError) as excinfo:
        validate_payment_receipt(form)
    assert excinfo.value.message_key == key


def test_payment_receipt_rejects_unknown_type():
    with pytest.raises(ValueError):
        validate_payment_receipt({"party_name": "A", "amount": "5", "type": "refund"})
