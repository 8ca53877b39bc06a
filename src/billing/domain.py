"""Billing bounded context — invoice composition and lifecycle.

Builds an Invoice for a single unit of work from configured client data and a
catalogue of items, runs its post-construction step and tears it down when the
unit of work ends.
"""

from protean.domain import Domain

from billing.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
billing = Domain(name="billing")
