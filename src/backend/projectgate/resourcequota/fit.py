"""Limit-set fit checking.

A limit set maps a resource name (open set: cpu, limits.memory, pods,
custom countable resources, ...) to a quantity string. A child limit set
"fits" a parent when, for every resource the child requests, the requested
amount does not exceed the parent's bound for that resource.

Intermediate tiers are sibling limit sets that share the same parent; their
amounts are added to the child's before comparing. Resources the parent does
not bound are unbounded, and resources only the parent declares never fail.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from projectgate.errors import QuantityParseError
from projectgate.resourcequota.quantity import (
    Ordering,
    add,
    compare,
    format_quantity,
    parse_quantity,
)

LimitSet = Mapping[str, str]


@dataclass(frozen=True)
class FitResult:
    fits: bool
    violations: list[str] = field(default_factory=list)
    exceeded: dict[str, str] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return ",".join(f"{name}={self.exceeded[name]}" for name in self.violations)


def _magnitudes(limits: LimitSet) -> dict[str, Decimal]:
    result: dict[str, Decimal] = {}
    for name, value in limits.items():
        if value is None or value == "":
            continue
        try:
            result[name] = parse_quantity(value)
        except QuantityParseError as exc:
            raise QuantityParseError(f"{name}: {exc.message}", field=name) from exc
    return result


def is_quota_fit(
    child: LimitSet,
    intermediate: Sequence[LimitSet],
    parent: LimitSet,
) -> FitResult:
    """Check that child (plus any intermediate tiers) is bounded by parent.

    Every failing resource is reported, sorted by name. Malformed quantities
    raise QuantityParseError naming the resource.
    """
    requested = _magnitudes(child)
    for tier in intermediate:
        for name, amount in _magnitudes(tier).items():
            requested[name] = add(requested.get(name, Decimal(0)), amount)

    bounds = _magnitudes(parent)

    exceeded = {
        name: format_quantity(amount)
        for name, amount in requested.items()
        if name in bounds and compare(amount, bounds[name]) is Ordering.GREATER
    }
    if not exceeded:
        return FitResult(fits=True)

    return FitResult(fits=False, violations=sorted(exceeded), exceeded=exceeded)
