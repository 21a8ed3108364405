from typing import Optional

from privguard.models.violation import ViolationKind, ViolationSeverity

SEVERITY_TABLE = {
    (ViolationKind.PII_DETECTED, "email"): ViolationSeverity.HIGH,
    (ViolationKind.PII_DETECTED, "phone"): ViolationSeverity.HIGH,
    (ViolationKind.PII_DETECTED, "ssn"): ViolationSeverity.HIGH,
    (ViolationKind.PII_DETECTED, "name"): ViolationSeverity.MEDIUM,
    (ViolationKind.PII_DETECTED, "creditCard"): ViolationSeverity.HIGH,
    (ViolationKind.PII_DETECTED, "dateOfBirth"): ViolationSeverity.HIGH,
    (ViolationKind.PII_DETECTED, "ipAddress"): ViolationSeverity.MEDIUM,
    (ViolationKind.PII_DETECTED, "address"): ViolationSeverity.HIGH,
    (ViolationKind.PII_DETECTED, "driverLicense"): ViolationSeverity.HIGH,
    (ViolationKind.PII_DETECTED, "macAddress"): ViolationSeverity.LOW,
    (ViolationKind.PII_DETECTED, "url"): ViolationSeverity.LOW,
    (ViolationKind.SENSITIVE_CONTENT, "explicitContent"): ViolationSeverity.HIGH,
    (ViolationKind.SENSITIVE_CONTENT, "relapseTerms"): ViolationSeverity.HIGH,
    (ViolationKind.SENSITIVE_CONTENT, "addictionTerms"): ViolationSeverity.HIGH,
    (ViolationKind.SENSITIVE_CONTENT, "emotionalTerms"): ViolationSeverity.HIGH,
    (ViolationKind.SENSITIVE_CONTENT, "behavioralTerms"): ViolationSeverity.HIGH,
    (ViolationKind.SENSITIVE_CONTENT, "mentalHealthTerms"): ViolationSeverity.HIGH,
    (ViolationKind.SENSITIVE_CONTENT, "timePatterns"): ViolationSeverity.MEDIUM,
    (ViolationKind.SENSITIVE_CONTENT, "routinePatterns"): ViolationSeverity.MEDIUM,
    (ViolationKind.SIZE_EXCEEDED, "size"): ViolationSeverity.MEDIUM,
}

SEVERITY_WEIGHTS = {
    ViolationSeverity.HIGH: 25,
    ViolationSeverity.MEDIUM: 10,
    ViolationSeverity.LOW: 5,
}


def severity_for(
    kind: ViolationKind,
    field: str,
    default: Optional[ViolationSeverity] = None,
) -> ViolationSeverity:
    """
    Look up the fixed severity of a (kind, field) pair.
    `default` covers lexicon categories injected at runtime.
    """
    severity = SEVERITY_TABLE.get((kind, field), default)
    if severity is None:
        raise ValueError(f"No severity defined for {kind.value}/{field}")
    return severity


def severity_to_weight(severity: ViolationSeverity) -> int:
    """
    Convert a violation severity to its deterministic score weight.
    """
    if severity not in SEVERITY_WEIGHTS:
        raise ValueError(f"Unknown severity: {severity}")

    return SEVERITY_WEIGHTS[severity]
