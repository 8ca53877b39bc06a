"""Invoice aggregate — a client, a description and an ordered list of items.

The aggregate is built once per unit of work and walks a fixed lifecycle:

State Machine:
    UNINITIALIZED → WIRED → INITIALIZED → DESTROYED

Transitions are recorded but not enforced. ``initialize()`` is not
idempotent: calling it twice appends both suffixes twice.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum
from functools import reduce

import structlog
from protean.fields import DateTime, HasMany, HasOne, Integer, String, Text, ValueObject

from billing.domain import billing
from billing.invoice.events import InvoiceDestroyed, InvoiceInitialized, InvoiceWired

logger = structlog.get_logger(__name__)

CLIENT_NAME_SUFFIX = " Cambios"
CLIENT_SEPARATOR = " del cliente: "


class InvoiceStatus(Enum):
    UNINITIALIZED = "Uninitialized"
    WIRED = "Wired"
    INITIALIZED = "Initialized"
    DESTROYED = "Destroyed"


@billing.entity(part_of="Invoice")
class Client:
    """The person being billed, sourced from configuration."""

    name = String(max_length=255)
    lastname = String(max_length=255)


@billing.value_object(part_of="Invoice")
class Product:
    """A catalogue product with an integer unit price."""

    name = String(required=True, max_length=255)
    price = Integer(required=True, min_value=0)


@billing.entity(part_of="Invoice")
class Item:
    """A line item: a product and the quantity bought."""

    product = ValueObject(Product, required=True)
    quantity = Integer(required=True, min_value=1)

    @property
    def importe(self) -> int:
        """Amount charged for this line."""
        return self.product.price * self.quantity

    @classmethod
    def of(cls, name: str, price: int, quantity: int = 1) -> "Item":
        return cls(product=Product(name=name, price=price), quantity=quantity)


@billing.aggregate
class Invoice:
    description = Text()
    client = HasOne(Client)
    items = HasMany(Item)
    status = String(
        choices=InvoiceStatus,
        default=InvoiceStatus.UNINITIALIZED.value,
    )
    wired_at = DateTime()
    initialized_at = DateTime()
    destroyed_at = DateTime()

    def wire(self, client: Client, items: Iterable[Item]) -> None:
        """Assign the client and the item sequence."""
        items = list(items)

        now = datetime.now(UTC)
        self.client = client
        for item in items:
            self.add_items(item)
        self.status = InvoiceStatus.WIRED.value
        self.wired_at = now

        self.raise_(
            InvoiceWired(
                invoice_id=str(self.id),
                client_name=client.name if client is not None else None,
                client_lastname=client.lastname if client is not None else None,
                item_count=len(items),
                wired_at=now,
            )
        )

    def initialize(self) -> None:
        """Post-construction step. Must run exactly once, after ``wire``.

        Renames the client first; the description then reads the new name.
        """
        logger.info("Creating invoice component", invoice_id=str(self.id))

        # The invoice is the only writer of its client once wired.
        self.client.name = self.client.name + CLIENT_NAME_SUFFIX
        self.description = self.description + CLIENT_SEPARATOR + self.client.name + " " + self.client.lastname

        now = datetime.now(UTC)
        self.status = InvoiceStatus.INITIALIZED.value
        self.initialized_at = now
        self.raise_(
            InvoiceInitialized(
                invoice_id=str(self.id),
                description=self.description,
                client_name=self.client.name,
                initialized_at=now,
            )
        )

    def destroy(self) -> None:
        """Teardown step. Releases nothing; only records the end of the unit of work."""
        logger.info("Destroying invoice component", invoice_id=str(self.id))

        now = datetime.now(UTC)
        self.status = InvoiceStatus.DESTROYED.value
        self.destroyed_at = now
        self.raise_(
            InvoiceDestroyed(
                invoice_id=str(self.id),
                destroyed_at=now,
            )
        )

    def calculate_total(self) -> int:
        """Sum of item amounts, left to right, starting from zero."""
        # An unwired invoice with no items never had an item sequence assigned.
        if self.status == InvoiceStatus.UNINITIALIZED.value and not self.items:
            raise TypeError("Invoice items have not been assigned")

        return reduce(lambda total, item: total + item.importe, self.items, 0)
