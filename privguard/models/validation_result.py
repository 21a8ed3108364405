from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from privguard.models.violation import Violation


class DataClassification(str, Enum):
    PUBLIC = "PUBLIC"
    CONFIDENTIAL = "CONFIDENTIAL"
    RESTRICTED = "RESTRICTED"


class ProcessingRecommendation(str, Enum):
    ALLOW = "ALLOW"
    ENCRYPT = "ENCRYPT"
    ANONYMIZE = "ANONYMIZE"
    REJECT = "REJECT"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a single validation call.

    `error` carries the exception class name when the payload could not be
    inspected. The result is then forced to the most restrictive values.
    `sensitive_fields` lists the distinct violation fields in the order
    they were first found.
    """
    is_compliant: bool
    violations: Tuple[Violation, ...]
    risk_score: int
    data_classification: DataClassification
    processing_recommendation: ProcessingRecommendation
    anonymization_required: bool = False
    error: Optional[str] = None
    reasons: Tuple[str, ...] = ()
    sensitive_fields: Tuple[str, ...] = ()

    @property
    def failed_closed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict:
        return {
            "is_compliant": self.is_compliant,
            "violations": [v.to_dict() for v in self.violations],
            "risk_score": self.risk_score,
            "data_classification": self.data_classification.value,
            "processing_recommendation": self.processing_recommendation.value,
            "anonymization_required": self.anonymization_required,
            "error": self.error,
            "reasons": list(self.reasons),
            "sensitive_fields": list(self.sensitive_fields),
        }
