"""
Demo records for the Storefront UI.

Static fixtures served by DemoStoreService. Amounts are SAR for orders and
purchases and USD for returns, matching what each screen displays.
"""

from storefront_ui.models.commerce import (
    Customer,
    InvoiceDocument,
    InvoiceLine,
    InvoiceSummary,
    KpiSummary,
    Product,
    ReturnRecord,
    TradeRecord,
    Transaction,
)

DEMO_ORDERS = [
    TradeRecord("10521", "John Doe", "shipped", "2023-10-23", 149.99),
    TradeRecord("10520", "Jane Smith", "processing", "2023-10-22", 87.50),
    TradeRecord("10519", "Robert Brown", "delivered", "2023-10-21", 250.00),
    TradeRecord("10518", "Emily White", "cancelled", "2023-10-20", 34.90),
]

DEMO_PURCHASES = [
    TradeRecord("20521", "Global Suppliers LLC", "received", "2023-10-23", 1249.99),
    TradeRecord("20520", "Tech Materials Co.", "approved", "2023-10-22", 587.50),
    TradeRecord("20519", "Premium Ingredients Inc.", "pending", "2023-10-21", 850.00),
    TradeRecord("20518", "Office Solutions Ltd.", "cancelled", "2023-10-20", 234.90),
]

ORDERS_KPI = KpiSummary(
    total_sales="125,430.00",
    currency="SAR",
    period="time.thisMonth",
    average_invoice_value="450.25",
    total_invoices="278",
    top_product="Premium Coffee Beans",
    sales_growth="+15.2%",
    growth_positive=True,
    outstanding_receivables="12,340.50",
)

PURCHASES_KPI = KpiSummary(
    total_sales="85,430.00",
    currency="SAR",
    period="time.thisMonth",
    average_invoice_value="250.25",
    total_invoices="178",
    top_product="Office Supplies Pack",
    sales_growth="+8.2%",
    growth_positive=True,
    outstanding_receivables="8,340.50",
)

DEMO_SALES_CATALOG = [
    Product(1, "Premium Product A", "PREM-001", 150.00, 15, "A", "electronics"),
    Product(2, "Standard Product B", "STD-002", 99.50, 8, "B", "electronics"),
    Product(3, "Basic Product C", "BAS-003", 45.00, 22, "C", "accessories"),
    Product(4, "Open-Box Gadget D", "OPEN-004", 120.00, 5, "A", "refurbished"),
]

DEMO_PURCHASE_CATALOG = [
    Product(1, "Office Supplies Bulk Pack", "OFF-BULK-001", 250.00, 5, "A", "office"),
    Product(2, "Raw Materials - Type B", "RAW-TYPEB-002", 180.50, 2, "B", "materials"),
    Product(3, "Manufacturing Components", "MAN-COMP-003", 320.00, 0, "A", "manufacturing"),
    Product(4, "Packaging Materials", "PAC-MAT-004", 75.00, 12, "C", "packaging"),
]

SALES_CATEGORIES = ("all", "electronics", "accessories", "refurbished")
PURCHASE_CATEGORIES = ("all", "office", "materials", "manufacturing", "packaging")

DEMO_INVENTORY = [
    Product(1, "Ergonomic Office Chair", "OC-BLK-001", 299.99, 52, status="inStock"),
    Product(2, "Wireless Mechanical Keyboard", "KB-WL-MEC-004", 120.00, 12, status="lowStock"),
    Product(3, "Adjustable Standing Desk", "DSK-ADJ-WHT-01", 450.00, 0, status="outOfStock"),
    Product(4, '32" 4K Monitor', "MON-4K-32-002", 399.00, 28, status="inStock"),
]

TOP_SELLING = (
    ("Ergonomic Office Chair", 124),
    ("Wireless Mechanical Keyboard", 98),
)

PRODUCT_CATEGORY_KEYS = (
    "products.addProduct.category.groceries",
    "products.addProduct.category.electronics",
    "products.addProduct.category.apparel",
)

DEMO_CUSTOMERS = [
    Customer(1, "Eleanor Vance", "eleanor.v@email.com", 1250, "silver"),
    Customer(2, "Marcus Holloway", "m.holloway@email.com", 870, "bronze"),
    Customer(3, "Clara Oswald", "clara.o@email.com", 2400, "gold"),
    Customer(4, "Kenji Tanaka", "kenji.tanaka@email.com", 550, "bronze"),
]

CUSTOMERS_KPI = (
    ("customer.kpi.totalCustomers", "152"),
    ("customer.kpi.receivables", "15,430 $"),
    ("customer.kpi.activeThisMonth", "45"),
)
NEW_CUSTOMERS_THIS_MONTH = 12

DEMO_TRANSACTIONS = [
    Transaction(
        "TXN73829", "receipt", "treasury.transactions.paymentFromAcme",
        "Oct 26, 10:45 AM", 1200.00,
    ),
    Transaction(
        "TXN73828", "payment", "treasury.transactions.officeSupplies",
        "Oct 26, 09:12 AM", 350.00,
    ),
    Transaction(
        "TXN73827", "receipt", "treasury.transactions.projectGammaPayment",
        "Oct 25, 03:30 PM", 3500.00,
    ),
    Transaction(
        "TXN73826", "payment", "treasury.transactions.monthlySoftwareSubscription",
        "Oct 25, 11:00 AM", 149.00,
    ),
]

TREASURY_FIGURES = {
    "current_balance": "15,230.50",
    "today_net_flow": "+850.00",
    "today_receipts": "1,200.00",
    "today_payments": "350.00",
    "total_receipts": "25,800.00",
    "total_payments": "10,569.50",
    "total_receivables": "5,400.00",
    "total_payables": "2,150.00",
}

DEMO_SALES_RETURNS = [
    ReturnRecord(
        "RI-00123", "John Smith", "completed", "2023-10-26", 150.00, "2023-10-15",
        "INV-54321", "Item was damaged upon arrival and customer requested a full refund.",
    ),
    ReturnRecord(
        "RI-00122", "Jane Doe", "pending", "2023-10-25", 89.99, "2023-10-12",
        "INV-54310", "Customer ordered the wrong size and exchanged for a different product.",
    ),
    ReturnRecord(
        "RI-00121", "Adam Miller", "refunded", "2023-10-24", 250.50, "2023-10-05",
        "INV-54298", "Product was not as described on the website. Full refund processed.",
    ),
]

DEMO_PURCHASE_RETURNS = [
    ReturnRecord(
        "PR-00123", "ABC Supplies", "completed", "2023-10-26", 300.00, "2023-10-15",
        "PO-54321", "Damaged goods received from supplier.",
    ),
]

_INVOICE_ROWS = (
    ("058", 1250.75, "paid", "2023-10-15"),
    ("057", 850.00, "partially_paid", "2023-10-12"),
    ("056", 3400.00, "unpaid", "2023-10-10"),
    ("055", 2150.25, "paid", "2023-10-08"),
    ("054", 975.50, "partially_paid", "2023-10-05"),
    ("053", 1750.00, "paid", "2023-10-03"),
    ("052", 4250.80, "unpaid", "2023-10-01"),
    ("051", 685.25, "paid", "2023-09-28"),
    ("050", 2890.15, "partially_paid", "2023-09-25"),
    ("049", 1125.60, "paid", "2023-09-22"),
)

_SALES_PARTIES = (
    "Global Tech Inc.",
    "Innovate Solutions",
    "Quantum Leap Co.",
    "Digital Dynamics",
    "Tech Vision LLC",
    "StartUp Innovations",
    "Enterprise Systems Ltd",
    "Cloud Services Pro",
    "Data Analytics Corp",
    "NextGen Software",
)

_PURCHASE_PARTIES = (
    "ABC Supplies Ltd",
    "Industrial Components Co",
    "TechParts Distributors",
    "Office Essentials Inc",
    "Manufacturing Supplies LLC",
    "Electronics Warehouse",
    "Raw Materials Corp",
    "Safety Equipment Pro",
    "Packaging Solutions Ltd",
    "Chemical Supplies Inc",
)

DEMO_SALES_INVOICES = [
    InvoiceSummary(f"INV-2024-{suffix}", party, amount, status, date)
    for (suffix, amount, status, date), party in zip(_INVOICE_ROWS, _SALES_PARTIES)
]

DEMO_PURCHASE_INVOICES = [
    InvoiceSummary(f"PO-2024-{suffix}", party, amount, status, date)
    for (suffix, amount, status, date), party in zip(_INVOICE_ROWS, _PURCHASE_PARTIES)
]

SAMPLE_INVOICE = InvoiceDocument(
    number="10521",
    invoice_type="sales",
    party_name="John Doe",
    invoice_date="2023-10-23",
    due_date="2023-10-30",
    order_status="shipped",
    payment_status="partially_paid",
    subtotal=159.99,
    discount=10.00,
    paid_amount=50.00,
    notes="Please leave the package at the front door.",
    line_items=[
        InvoiceLine("Premium Coffee Beans", "CB-001", 1, 99.99),
        InvoiceLine("Artisan Mug", "MG-012", 2, 30.00),
    ],
)
