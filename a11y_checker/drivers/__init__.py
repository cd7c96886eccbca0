"""Browser page adapters used by the audit runner."""
from a11y_checker.drivers.base import PageAdapter

__all__ = ["PageAdapter"]
