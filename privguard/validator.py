"""
Validation facade.

Runs detection, aggregation and classification against one configuration
snapshot and fails closed on any internal error: data that cannot be
inspected is treated as maximally sensitive, never as safe.
"""
import logging
import time
from typing import Any, Mapping, Optional, Sequence

from privguard.audit.sink import AuditEvent, AuditSink, LoggingAuditSink
from privguard.config.store import ConfigStore
from privguard.config.validator_config import ValidatorConfig
from privguard.decision.classifier import classification_reasons, classify
from privguard.detection.detector import detect
from privguard.detection.lexicon import DEFAULT_LEXICON, Lexicon
from privguard.models.compliance_report import ComplianceReport
from privguard.models.validation_result import (
    DataClassification,
    ProcessingRecommendation,
    ValidationResult,
)
from privguard.models.violation import Violation
from privguard.reporting.compliance_report import generate_report as render_report
from privguard.scoring.aggregator import score, severity_breakdown
from privguard.scoring.thresholds import MAX_RISK_SCORE
from privguard.telemetry import (
    emit_exception_telemetry,
    emit_validation_telemetry,
    scrub_exception_for_telemetry,
)

logger = logging.getLogger("privguard.validator")


def fail_closed_result(error: Exception) -> ValidationResult:
    return ValidationResult(
        is_compliant=False,
        violations=(),
        risk_score=MAX_RISK_SCORE,
        data_classification=DataClassification.RESTRICTED,
        processing_recommendation=ProcessingRecommendation.REJECT,
        anonymization_required=True,
        error=scrub_exception_for_telemetry(error),
        reasons=("Payload could not be inspected",),
    )


def evaluate(
    payload: Any,
    config: ValidatorConfig,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> ValidationResult:
    """
    Happy-path evaluation. Raises on payloads that cannot be inspected.
    """
    violations = tuple(detect(payload, config, lexicon))
    risk_score = score(violations)
    classification, recommendation = classify(
        violations,
        risk_score,
        encrypt_threshold=config.encrypt_score_threshold,
        require_encryption=config.require_encryption,
    )
    sensitive_fields = tuple(dict.fromkeys(v.field for v in violations))

    return ValidationResult(
        is_compliant=not violations,
        violations=violations,
        risk_score=risk_score,
        data_classification=classification,
        processing_recommendation=recommendation,
        anonymization_required=recommendation == ProcessingRecommendation.ANONYMIZE,
        reasons=classification_reasons(violations, risk_score, classification),
        sensitive_fields=sensitive_fields,
    )


class PrivacyValidator:
    def __init__(
        self,
        config_store: Optional[ConfigStore] = None,
        lexicon: Optional[Lexicon] = None,
        audit_sink: Optional[AuditSink] = None,
    ):
        self.config_store = config_store or ConfigStore()
        self.lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON
        self.audit_sink = audit_sink or LoggingAuditSink()

    def validate(self, payload: Any = None, context: Optional[str] = None) -> ValidationResult:
        """
        Validate one payload. Never raises.
        """
        start_time = time.perf_counter()
        config = self.config_store.snapshot()

        try:
            result = evaluate(payload, config, self.lexicon)
        except Exception as e:
            logger.error(
                "Privacy validation failed closed: %s",
                scrub_exception_for_telemetry(e),
            )
            emit_exception_telemetry(e)
            result = fail_closed_result(e)

        if config.log_violations and result.violations:
            self._log_violations(result.violations, context)

        emit_validation_telemetry(
            latency_ms=int((time.perf_counter() - start_time) * 1000),
            risk_score=result.risk_score,
            classification=result.data_classification.value,
            failed_closed=result.failed_closed,
        )
        return result

    def report(self, result: ValidationResult) -> ComplianceReport:
        return render_report(result)

    def generate_report(self, payload: Any = None, context: Optional[str] = None) -> ComplianceReport:
        """Validate `payload` and render the compliance report in one call."""
        return render_report(self.validate(payload, context))

    def update_config(self, changes: Optional[Mapping[str, Any]] = None, **fields: Any) -> ValidatorConfig:
        return self.config_store.update(changes, **fields)

    def get_config(self) -> ValidatorConfig:
        return self.config_store.snapshot()

    def _log_violations(self, violations: Sequence[Violation], context: Optional[str]) -> None:
        logger.warning(
            "Privacy violations detected: context=%s count=%d severity=%s",
            context or "unknown",
            len(violations),
            severity_breakdown(violations),
        )
        for v in violations:
            try:
                self.audit_sink.record(AuditEvent.from_violation(v, context))
            except Exception as e:
                # Audit is best-effort; the validation result stands
                logger.warning("Audit sink failure: %s", scrub_exception_for_telemetry(e))


privacy_validator = PrivacyValidator()


def validate(payload: Any = None, context: Optional[str] = None) -> ValidationResult:
    return privacy_validator.validate(payload, context)


def generate_report(payload: Any = None, context: Optional[str] = None) -> ComplianceReport:
    return privacy_validator.generate_report(payload, context)


def update_config(changes: Optional[Mapping[str, Any]] = None, **fields: Any) -> ValidatorConfig:
    return privacy_validator.update_config(changes, **fields)


def get_config() -> ValidatorConfig:
    return privacy_validator.get_config()
