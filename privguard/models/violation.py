from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViolationKind(str, Enum):
    PII_DETECTED = "PII_DETECTED"
    SENSITIVE_CONTENT = "SENSITIVE_CONTENT"
    SIZE_EXCEEDED = "SIZE_EXCEEDED"


class ViolationSeverity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    field: str  # matcher label, e.g. email | relapseTerms | size
    severity: ViolationSeverity
    path: str = "$"
    description: str = ""
    value: Optional[str] = None  # masked match, PII only

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "field": self.field,
            "severity": self.severity.value,
            "path": self.path,
            "description": self.description,
            "value": self.value,
        }
