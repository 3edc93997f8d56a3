"""Entity package: BillingProfile."""

from .entity import BillingProfile

__all__ = ["BillingProfile"]
