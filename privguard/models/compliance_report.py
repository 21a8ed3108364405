from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ComplianceReport:
    """
    Read-only, human-readable projection of a ValidationResult.
    """

    summary: str
    recommendations: Tuple[str, ...]
    risk_assessment: str
    next_steps: Tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "recommendations": list(self.recommendations),
            "risk_assessment": self.risk_assessment,
            "next_steps": list(self.next_steps),
        }
