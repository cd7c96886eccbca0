"""WCAG conformance levels mapped to axe-core tags."""
from __future__ import annotations

from a11y_checker.audit.models import AuditOptions, Impact

LEVELS = ("A", "AA", "AAA")

# axe-core tag prefix per WCAG version
_VERSION_PREFIXES = {
    "2.0": ("wcag2",),
    "2.1": ("wcag2", "wcag21"),
    "2.2": ("wcag2", "wcag21", "wcag22"),
}


def tags_for_level(level: str = "AA", version: str = "2.2") -> frozenset[str]:
    """Return the axe-core tags that make up a WCAG conformance level.

    Levels are cumulative, so ``AA`` also includes every ``A`` tag, and
    versions include the tags of earlier versions.

    Raises:
        ValueError: On an unknown level or version
    """
    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown WCAG level '{level}'. Use one of: {', '.join(LEVELS)}")
    prefixes = _VERSION_PREFIXES.get(version)
    if prefixes is None:
        raise ValueError(
            f"Unknown WCAG version '{version}'. Use one of: {', '.join(_VERSION_PREFIXES)}"
        )

    suffixes = [s.lower() for s in LEVELS[: LEVELS.index(level) + 1]]
    return frozenset(f"{prefix}{suffix}" for prefix in prefixes for suffix in suffixes)


def options_for_level(
    level: str = "AA",
    version: str = "2.2",
    included_impacts: frozenset[Impact] | None = None,
) -> AuditOptions:
    return AuditOptions(
        tags=tags_for_level(level, version),
        included_impacts=included_impacts or frozenset(),
    )
