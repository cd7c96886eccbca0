"""Data model for accessibility audits."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class Impact(Enum):
    """Severity of a violation as classified by axe-core, least severe first."""
    MINOR = "minor"
    MODERATE = "moderate"
    SERIOUS = "serious"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return list(Impact).index(self)

    def __lt__(self, other):
        if not isinstance(other, Impact):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Impact):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Impact):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Impact):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: str | Impact) -> Impact:
        """Convert a string such as ``"Serious"`` to an Impact.

        Raises:
            ValueError: If the value is not one of the four impact levels
        """
        if isinstance(value, Impact):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(i.value for i in cls)
            raise ValueError(f"Unknown impact '{value}'. Use one of: {allowed}") from None


def _as_strings(value: str | Iterable[str]) -> tuple[str, ...]:
    # a bare selector or tag would otherwise be split into characters
    if isinstance(value, str):
        return (value,)
    return tuple(value)


class FilterKind(Enum):
    """How axe-core's runOnly option selects rules."""
    TAG = "tag"
    RULE = "rule"


@dataclass(frozen=True)
class RunOnly:
    """Restricts an axe-core run to rules matching tags or rule ids."""
    kind: FilterKind
    values: frozenset[str]

    def to_axe(self) -> dict:
        return {"type": self.kind.value, "values": sorted(self.values)}


@dataclass(frozen=True)
class AuditTarget:
    """What to scan: the whole page, or the subtrees matched by selectors.

    Attributes:
        include: Selectors whose elements are scanned; empty means the full page
        exclude: Selectors whose elements are skipped
    """
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "include", _as_strings(self.include))
        object.__setattr__(self, "exclude", _as_strings(self.exclude))

    @classmethod
    def page(cls) -> AuditTarget:
        return cls()

    @classmethod
    def selector(cls, selector: str, *more: str) -> AuditTarget:
        return cls(include=(selector, *more))

    @property
    def is_full_page(self) -> bool:
        return not self.include

    def to_axe(self) -> dict | None:
        """Build an axe-core context object, or None for the whole document."""
        if not self.include and not self.exclude:
            return None
        context: dict[str, Any] = {}
        if self.include:
            context["include"] = [[s] for s in self.include]
        if self.exclude:
            context["exclude"] = [[s] for s in self.exclude]
        return context


@dataclass(frozen=True)
class AuditOptions:
    """Rule and impact filters for one audit.

    ``tags`` and ``rules`` map to axe-core's ``runOnly`` option and cannot be
    combined. ``included_impacts`` is applied to the reported violations.
    """
    tags: frozenset[str] = frozenset()
    rules: frozenset[str] = frozenset()
    included_impacts: frozenset[Impact] = frozenset()
    disabled_rules: frozenset[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "tags", frozenset(_as_strings(self.tags)))
        object.__setattr__(self, "rules", frozenset(_as_strings(self.rules)))
        impacts = self.included_impacts
        if isinstance(impacts, (str, Impact)):
            impacts = (impacts,)
        object.__setattr__(
            self, "included_impacts", frozenset(Impact.parse(i) for i in impacts)
        )
        object.__setattr__(self, "disabled_rules", frozenset(_as_strings(self.disabled_rules)))
        if self.tags and self.rules:
            raise ValueError("Filter by tags or by rule ids, not both")

    @property
    def run_only(self) -> RunOnly | None:
        if self.tags:
            return RunOnly(FilterKind.TAG, self.tags)
        if self.rules:
            return RunOnly(FilterKind.RULE, self.rules)
        return None

    def to_axe(self) -> dict:
        """Build the options object passed to ``axe.run``."""
        options: dict[str, Any] = {"resultTypes": ["violations"]}
        run_only = self.run_only
        if run_only is not None:
            options["runOnly"] = run_only.to_axe()
        if self.disabled_rules:
            options["rules"] = {
                rule_id: {"enabled": False} for rule_id in sorted(self.disabled_rules)
            }
        return options

    def accepts(self, violation: Violation) -> bool:
        """Check a violation against the tag, rule and impact filters."""
        if self.tags and not self.tags.intersection(violation.tags):
            return False
        if self.rules and violation.id not in self.rules:
            return False
        if self.included_impacts and violation.impact not in self.included_impacts:
            return False
        return True


def _flatten_target(target: Iterable[Any]) -> tuple[str, ...]:
    # Nested lists describe selectors crossing iframe or shadow DOM boundaries
    parts = []
    for item in target:
        if isinstance(item, str):
            parts.append(item)
        else:
            parts.append(" >>> ".join(str(s) for s in item))
    return tuple(parts)


@dataclass(frozen=True)
class NodeResult:
    """A DOM node affected by a violation."""
    target: tuple[str, ...]
    html: str = ""
    failure_summary: str | None = None

    @property
    def selector(self) -> str:
        return ", ".join(self.target)

    @classmethod
    def from_axe(cls, raw: dict) -> NodeResult:
        return cls(
            target=_flatten_target(raw.get("target", [])),
            html=raw.get("html", ""),
            failure_summary=raw.get("failureSummary"),
        )

    def to_dict(self) -> dict:
        return {
            "target": list(self.target),
            "html": self.html,
            "failure_summary": self.failure_summary,
        }


@dataclass(frozen=True)
class Violation:
    """A single accessibility rule failure.

    Attributes:
        id: axe-core rule id, e.g. ``color-contrast``
        description: What the rule checks
        help: Short remediation hint
        help_url: Link to the Deque rule documentation
        impact: Severity of the failure
        tags: Rule-set tags of the rule, e.g. ``wcag2aa``
        nodes: Affected nodes in the order axe-core reported them
    """
    id: str
    description: str
    impact: Impact
    help: str = ""
    help_url: str = ""
    tags: frozenset[str] = frozenset()
    nodes: tuple[NodeResult, ...] = ()

    @classmethod
    def from_axe(cls, raw: dict) -> Violation:
        return cls(
            id=raw.get("id", ""),
            description=raw.get("description", ""),
            impact=Impact.parse(raw.get("impact") or Impact.MINOR),
            help=raw.get("help", ""),
            help_url=raw.get("helpUrl", ""),
            tags=frozenset(raw.get("tags", [])),
            nodes=tuple(NodeResult.from_axe(n) for n in raw.get("nodes", [])),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "impact": self.impact.value,
            "description": self.description,
            "help": self.help,
            "help_url": self.help_url,
            "tags": sorted(self.tags),
            "nodes": [n.to_dict() for n in self.nodes],
        }


@dataclass(frozen=True)
class AuditResult:
    """Violations produced by one audit run."""
    violations: tuple[Violation, ...] = ()
    url: str | None = None
    timestamp: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "violations", tuple(self.violations))

    @property
    def passed(self) -> bool:
        return len(self.violations) == 0

    @property
    def rule_ids(self) -> frozenset[str]:
        return frozenset(v.id for v in self.violations)

    @property
    def node_count(self) -> int:
        return sum(len(v.nodes) for v in self.violations)

    def count_by_impact(self) -> dict[Impact, int]:
        """Count violations per impact, most severe first."""
        counts = {impact: 0 for impact in sorted(Impact, reverse=True)}
        for violation in self.violations:
            counts[violation.impact] += 1
        return counts

    def filtered(self, options: AuditOptions) -> AuditResult:
        return AuditResult(
            violations=tuple(v for v in self.violations if options.accepts(v)),
            url=self.url,
            timestamp=self.timestamp,
        )

    @classmethod
    def from_axe(cls, raw: dict) -> AuditResult:
        return cls(
            violations=tuple(Violation.from_axe(v) for v in raw.get("violations", [])),
            url=raw.get("url"),
            timestamp=raw.get("timestamp"),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "url": self.url,
            "timestamp": self.timestamp,
            "passed": self.passed,
            "summary": {i.value: n for i, n in self.count_by_impact().items()},
            "violations": [v.to_dict() for v in self.violations],
        }
