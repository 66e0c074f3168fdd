"""Reflex configuration for the Storefront UI application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("STOREFRONT_PORT", "8000"))

config = rx.Config(
    app_name="storefront_ui",
    # Use the src directory structure
    app_module_import="storefront_ui.app",
    backend_port=APP_PORT,
)
