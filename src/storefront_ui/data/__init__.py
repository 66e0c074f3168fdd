"""
Static demo data for the Storefront UI.

Modules:
- demo_records: orders, purchases, catalogs, customers, treasury
  transactions, returns and invoices served by DemoStoreService
"""
