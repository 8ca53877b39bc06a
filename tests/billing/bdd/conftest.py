"""Shared BDD fixtures and step definitions for the Billing domain."""

import pytest
from billing.invoice.events import InvoiceDestroyed, InvoiceInitialized, InvoiceWired
from billing.invoice.invoice import Client, Invoice
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup
_EVENT_CLASSES = {
    "InvoiceWired": InvoiceWired,
    "InvoiceInitialized": InvoiceInitialized,
    "InvoiceDestroyed": InvoiceDestroyed,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an invoice described as "{description}"'), target_fixture="invoice")
def _new_invoice(description):
    return Invoice(description=description)


@given(parsers.cfparse('a client named "{name}" "{lastname}"'), target_fixture="client")
def _new_client(name, lastname):
    return Client(name=name, lastname=lastname)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("an {event_type} event is raised"))
def event_raised(invoice, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(isinstance(e, event_cls) for e in invoice._events)


@then(parsers.cfparse("a {error_type} is raised"))
def error_raised(error, error_type):
    assert error["exc"] is not None
    assert type(error["exc"]).__name__ == error_type
