from collections import Counter
from typing import Dict, Iterable

from privguard.models.violation import Violation, ViolationSeverity
from privguard.risk.severity import severity_to_weight
from privguard.scoring.thresholds import MAX_RISK_SCORE


def score(violations: Iterable[Violation]) -> int:
    """
    Sum of severity weights, capped at 100. No violations scores 0.
    """
    total = sum(severity_to_weight(v.severity) for v in violations)
    return min(MAX_RISK_SCORE, total)


def severity_breakdown(violations: Iterable[Violation]) -> Dict[str, int]:
    counts = Counter(v.severity for v in violations)
    return {s.value.lower(): counts.get(s, 0) for s in ViolationSeverity}
