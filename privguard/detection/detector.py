from collections.abc import Mapping
from typing import Any, List, Optional

from privguard.config.validator_config import ValidatorConfig
from privguard.detection.lexicon import DEFAULT_LEXICON, Lexicon
from privguard.detection.patterns import (
    DISCLOSURE_ORDER,
    DISCLOSURE_PATTERNS,
    PII_ORDER,
    PII_PATTERNS,
)
from privguard.detection.traversal import canonical_size, iter_string_leaves
from privguard.models.violation import Violation, ViolationKind
from privguard.risk.severity import severity_for

SIZE_FIELD = "size"


def is_empty_payload(payload: Any) -> bool:
    if payload is None:
        return True
    if isinstance(payload, (str, Mapping, list, tuple)):
        return len(payload) == 0
    return False


def mask_value(value: str) -> str:
    """
    Keep the first and last two characters, star the rest.
    Values of four characters or fewer are fully masked.
    """
    if len(value) <= 4:
        return "****"
    return value[:2] + "*" * (len(value) - 4) + value[-2:]


def _violation(
    kind: ViolationKind,
    field: str,
    path: str,
    description: str,
    default=None,
    value: Optional[str] = None,
) -> Violation:
    return Violation(
        kind=kind,
        field=field,
        severity=severity_for(kind, field, default),
        path=path,
        description=description,
        value=value,
    )


def scan_text(text: str, path: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Violation]:
    """
    Run every matcher against one string leaf.
    Each matcher contributes at most one violation per leaf.
    """
    violations: List[Violation] = []

    for label in PII_ORDER:
        match = PII_PATTERNS[label].search(text)
        if match:
            violations.append(_violation(
                ViolationKind.PII_DETECTED, label, path,
                f"{label.upper()} detected in data",
                value=mask_value(match.group(0)),
            ))

    for category in lexicon:
        if category.matches(text):
            violations.append(_violation(
                ViolationKind.SENSITIVE_CONTENT, category.name, path,
                f"Sensitive {category.name} content detected",
                default=category.severity,
            ))

    for label in DISCLOSURE_ORDER:
        if DISCLOSURE_PATTERNS[label].search(text):
            violations.append(_violation(
                ViolationKind.SENSITIVE_CONTENT, label, path,
                f"Potentially identifying {label} pattern detected",
            ))

    return violations


def detect(
    payload: Any,
    config: ValidatorConfig,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> List[Violation]:
    """
    Inspect a JSON-like payload and return every violation found.

    The size check runs first. Cycles and values with no JSON rendering
    propagate to the caller.
    """
    violations: List[Violation] = []
    if is_empty_payload(payload):
        return violations

    size = canonical_size(payload)
    if size > config.max_data_size:
        violations.append(_violation(
            ViolationKind.SIZE_EXCEEDED, SIZE_FIELD, "$",
            f"Data size ({size} bytes) exceeds maximum allowed ({config.max_data_size} bytes)",
        ))

    for path, text in iter_string_leaves(payload):
        violations.extend(scan_text(text, path, lexicon))

    return violations
