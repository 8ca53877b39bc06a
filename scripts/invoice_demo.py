"""Demo: Build an invoice for one unit of work and print it.

Opens an invoice scope with the configured client and the chosen item
catalogue, prints the invoice and its total, and lets the scope tear the
invoice down on exit.

Configuration comes from the environment:
    BILLING_INVOICE_DESCRIPTION, BILLING_CLIENT_NAME,
    BILLING_CLIENT_LASTNAME, BILLING_ITEMS_QUALIFIER

Usage:
    python scripts/invoice_demo.py
    python scripts/invoice_demo.py --items office
    python scripts/invoice_demo.py --description "Factura" --name Juan --lastname Perez
"""

import argparse
import json
import sys

# Add src/ to path so we can import domain modules
sys.path.insert(0, "src")


def main():
    from billing.config import InvoiceSettings
    from billing.invoice.catalogue import available_qualifiers

    defaults = InvoiceSettings.from_env()

    parser = argparse.ArgumentParser(description="Build and print a request-scoped invoice")
    parser.add_argument("--description", default=defaults.description_template, help="Invoice description")
    parser.add_argument("--name", default=defaults.client_name, help="Client name")
    parser.add_argument("--lastname", default=defaults.client_lastname, help="Client last name")
    parser.add_argument(
        "--items",
        choices=available_qualifiers(),
        default=defaults.items_qualifier,
        help=f"Item catalogue (default: {defaults.items_qualifier})",
    )
    args = parser.parse_args()

    from billing.domain import billing
    from billing.invoice.lifecycle import invoice_scope

    settings = InvoiceSettings(
        description_template=args.description,
        client_name=args.name,
        client_lastname=args.lastname,
        items_qualifier=args.items,
    )

    billing.init()
    with billing.domain_context():
        with invoice_scope(settings) as invoice:
            payload = invoice.to_dict()
            payload["total"] = invoice.calculate_total()
            print(json.dumps(payload, indent=2, default=str))


if __name__ == "__main__":
    main()
