"""Base class for browser page adapters."""
from __future__ import annotations

from abc import ABC, abstractmethod

# Script run in the page after injection to confirm axe-core is usable
ENGINE_CHECK_JS = "typeof window.axe !== 'undefined' && typeof window.axe.run === 'function'"


class PageAdapter(ABC):
    """Uniform view of a loaded browser page for the audit runner.

    Subclasses wrap one automation stack and must implement:
    - url: Address of the loaded page
    - add_script(): Evaluate a script source in the page
    - engine_loaded(): Whether axe-core is present
    - count(): Number of elements matching a selector
    - wait_for(): Block until a selector matches
    - run_axe(): Call ``axe.run`` and return its JSON result
    """

    @property
    @abstractmethod
    def url(self) -> str:
        """Address of the currently loaded page."""
        pass

    @abstractmethod
    def add_script(self, source: str) -> None:
        """Evaluate script source in the page's main frame."""
        pass

    @abstractmethod
    def engine_loaded(self) -> bool:
        pass

    @abstractmethod
    def count(self, selector: str) -> int:
        """Count elements matching a selector; invalid selectors count as 0."""
        pass

    @abstractmethod
    def wait_for(self, selector: str, timeout_ms: int = 5000) -> None:
        """Wait until the selector matches at least one element.

        Raises:
            TargetNotFound: If nothing matches before the timeout
        """
        pass

    @abstractmethod
    def run_axe(self, context: dict | None, options: dict) -> dict:
        """Run axe-core and return the raw result object.

        Args:
            context: axe-core context (include/exclude), None for the document
            options: axe-core run options

        Returns:
            Dictionary with ``url``, ``timestamp`` and ``violations``
        """
        pass
