from typing import List, Sequence, Tuple

from privguard.models.validation_result import DataClassification, ProcessingRecommendation
from privguard.models.violation import Violation, ViolationKind
from privguard.scoring.thresholds import (
    ENCRYPT_SCORE_MIN,
    HIGH_RISK_MIN,
    MODERATE_RISK_MIN,
    RESTRICTED_DISTINCT_PII,
    RESTRICTED_PII_FIELDS,
    RESTRICTED_SCORE_MIN,
    RESTRICTED_VIOLATION_COUNT,
)

# Kinds whose presence in a CONFIDENTIAL payload calls for anonymization
ANONYMIZE_KINDS = {ViolationKind.PII_DETECTED, ViolationKind.SENSITIVE_CONTENT}


def _pii_fields(violations: Sequence[Violation]) -> set:
    return {v.field for v in violations if v.kind == ViolationKind.PII_DETECTED}


def restriction_reasons(violations: Sequence[Violation], risk_score: int) -> List[str]:
    """
    Every RESTRICTED condition the violation set meets, in a fixed order.
    An empty list means the payload is not RESTRICTED.
    """
    reasons = []
    pii_fields = _pii_fields(violations)

    if len(violations) > RESTRICTED_VIOLATION_COUNT:
        reasons.append(f"More than {RESTRICTED_VIOLATION_COUNT} violations detected")
    if risk_score >= RESTRICTED_SCORE_MIN:
        reasons.append(f"Risk score {risk_score} at or above {RESTRICTED_SCORE_MIN}")
    for name in sorted(pii_fields & RESTRICTED_PII_FIELDS):
        reasons.append(f"Restricted identifier present: {name}")
    if len(pii_fields) >= RESTRICTED_DISTINCT_PII:
        reasons.append(f"{len(pii_fields)} distinct PII types detected")

    return reasons


def _is_restricted(violations: Sequence[Violation], risk_score: int) -> bool:
    if len(violations) > RESTRICTED_VIOLATION_COUNT or risk_score >= RESTRICTED_SCORE_MIN:
        return True

    pii_fields = _pii_fields(violations)
    if pii_fields & RESTRICTED_PII_FIELDS:
        return True

    return len(pii_fields) >= RESTRICTED_DISTINCT_PII


def classify_data(violations: Sequence[Violation], risk_score: int) -> DataClassification:
    if not violations:
        return DataClassification.PUBLIC
    if _is_restricted(violations, risk_score):
        return DataClassification.RESTRICTED
    return DataClassification.CONFIDENTIAL


def classification_reasons(
    violations: Sequence[Violation],
    risk_score: int,
    classification: DataClassification,
) -> Tuple[str, ...]:
    if classification == DataClassification.PUBLIC:
        return ("No privacy violations detected",)
    if classification == DataClassification.RESTRICTED:
        return tuple(restriction_reasons(violations, risk_score))
    return (f"{len(violations)} violation(s) below the restricted thresholds",)


def recommend(
    violations: Sequence[Violation],
    risk_score: int,
    classification: DataClassification,
    encrypt_threshold: int = ENCRYPT_SCORE_MIN,
    require_encryption: bool = False,
) -> ProcessingRecommendation:
    if classification == DataClassification.RESTRICTED:
        return ProcessingRecommendation.REJECT

    if classification == DataClassification.CONFIDENTIAL and any(
        v.kind in ANONYMIZE_KINDS for v in violations
    ):
        return ProcessingRecommendation.ANONYMIZE

    if risk_score >= encrypt_threshold:
        return ProcessingRecommendation.ENCRYPT

    if require_encryption and violations:
        return ProcessingRecommendation.ENCRYPT

    return ProcessingRecommendation.ALLOW


def classify(
    violations: Sequence[Violation],
    risk_score: int,
    encrypt_threshold: int = ENCRYPT_SCORE_MIN,
    require_encryption: bool = False,
) -> Tuple[DataClassification, ProcessingRecommendation]:
    """
    Map a violation set and its score to a sensitivity tier and a handling
    action. Both ladders are first-match-wins.
    """
    classification = classify_data(violations, risk_score)
    recommendation = recommend(
        violations,
        risk_score,
        classification,
        encrypt_threshold=encrypt_threshold,
        require_encryption=require_encryption,
    )
    return classification, recommendation


def risk_tier(risk_score: int) -> str:
    if risk_score >= HIGH_RISK_MIN:
        return "HIGH RISK"
    if risk_score >= MODERATE_RISK_MIN:
        return "LOW/MODERATE RISK"
    return "MINIMAL RISK"
