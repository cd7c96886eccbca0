"""axe-core engine loading."""
from a11y_checker.engine.source import load_axe_source

__all__ = ["load_axe_source"]
