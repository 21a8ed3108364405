from typing import List

from privguard.decision.classifier import risk_tier
from privguard.models.compliance_report import ComplianceReport
from privguard.models.validation_result import ProcessingRecommendation, ValidationResult
from privguard.models.violation import ViolationKind

KIND_RECOMMENDATIONS = {
    ViolationKind.PII_DETECTED: "Remove or anonymize personally identifying information",
    ViolationKind.SENSITIVE_CONTENT: "Encode, generalize or remove sensitive content references",
    ViolationKind.SIZE_EXCEEDED: "Reduce data size or split into smaller chunks",
}

ACTION_RECOMMENDATIONS = {
    ProcessingRecommendation.ENCRYPT: "Encrypt the data before storage or transmission",
    ProcessingRecommendation.ANONYMIZE: "Anonymize the data before processing",
    ProcessingRecommendation.REJECT: "Reject the data; do not process or transmit it",
}

RISK_EXPLANATIONS = {
    "HIGH RISK": "Data contains critical privacy violations and should not be processed without significant anonymization.",
    "LOW/MODERATE RISK": "Data contains some potentially sensitive information but can be processed with basic protection.",
    "MINIMAL RISK": "Data appears safe for processing with standard privacy measures.",
}

NEXT_STEPS = {
    ProcessingRecommendation.REJECT: (
        "Do not process this data",
        "Implement additional anonymization",
        "Consider manual review",
    ),
    ProcessingRecommendation.ANONYMIZE: (
        "Apply comprehensive anonymization",
        "Remove or encode sensitive terms",
        "Re-validate after anonymization",
    ),
    ProcessingRecommendation.ENCRYPT: (
        "Apply encryption before processing",
        "Use secure transmission channels",
        "Implement access controls",
    ),
}

REVIEW_STEPS = (
    "Review the flagged findings before processing",
    "Re-validate after remediation",
)


def generate_report(result: ValidationResult) -> ComplianceReport:
    """
    Render a human-readable compliance report from a validation result.
    Pure function: the same result always yields the same report.
    """
    summary = (
        f"Data classification: {result.data_classification.value}, "
        f"Risk score: {result.risk_score}/100, "
        f"Violations: {len(result.violations)}"
    )
    if result.failed_closed:
        summary += f", Internal error: {result.error}"

    recommendations: List[str] = []
    for v in result.violations:
        text = KIND_RECOMMENDATIONS[v.kind]
        if text not in recommendations:
            recommendations.append(text)
    if result.failed_closed:
        recommendations.append("Payload could not be inspected; manual review required")
    action = ACTION_RECOMMENDATIONS.get(result.processing_recommendation)
    if action:
        recommendations.append(action)

    tier = risk_tier(result.risk_score)
    risk_assessment = f"{tier}: {RISK_EXPLANATIONS[tier]}"

    if result.processing_recommendation in NEXT_STEPS:
        next_steps = NEXT_STEPS[result.processing_recommendation]
    elif result.violations:
        next_steps = REVIEW_STEPS
    else:
        next_steps = ()

    return ComplianceReport(
        summary=summary,
        recommendations=tuple(recommendations),
        risk_assessment=risk_assessment,
        next_steps=tuple(next_steps),
    )
