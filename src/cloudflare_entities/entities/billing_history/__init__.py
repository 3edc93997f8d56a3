"""Entity package: BillingHistory."""

from .entity import BillingHistory

__all__ = ["BillingHistory"]
