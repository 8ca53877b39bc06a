"""Invoice settings — the configured values an invoice is built from.

Provides get_settings() / set_settings() to swap the active settings:
- read from BILLING_* environment variables by default
- replaced wholesale in tests
"""

import os

from pydantic import BaseModel, ConfigDict


class InvoiceSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    description_template: str
    client_name: str
    client_lastname: str
    items_qualifier: str = "default"

    @classmethod
    def from_env(cls) -> "InvoiceSettings":
        return cls(
            description_template=os.environ.get("BILLING_INVOICE_DESCRIPTION", "Factura de oficina"),
            client_name=os.environ.get("BILLING_CLIENT_NAME", "Andres"),
            client_lastname=os.environ.get("BILLING_CLIENT_LASTNAME", "Guzman"),
            items_qualifier=os.environ.get("BILLING_ITEMS_QUALIFIER", "default"),
        )


_current_settings: InvoiceSettings | None = None


def get_settings() -> InvoiceSettings:
    """Return the active settings. Defaults to the environment."""
    global _current_settings
    if _current_settings is None:
        _current_settings = InvoiceSettings.from_env()
    return _current_settings


def set_settings(settings: InvoiceSettings) -> None:
    """Override the active settings (useful for tests)."""
    global _current_settings
    _current_settings = settings


def reset_settings() -> None:
    """Reset to settings read from the environment."""
    global _current_settings
    _current_settings = None
