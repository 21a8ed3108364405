import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from privguard.config.env import load_config_from_env
from privguard.config.store import ConfigStore
from privguard.errors import ConfigUpdateError
from privguard.telemetry import init_telemetry
from privguard.validator import PrivacyValidator

# --- 1. SETUP AUDIT LOGGING ---
logging.basicConfig(
    filename=os.getenv("PRIVGUARD_AUDIT_LOG") or None,
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
audit_logger = logging.getLogger("audit")

tags_metadata = [
    {
        "name": "Validation",
        "description": "Privacy validation and compliance reporting for arbitrary JSON payloads.",
    },
    {
        "name": "Configuration",
        "description": "Read and merge-update the active validation policy.",
    },
    {
        "name": "System",
        "description": "Health checks and operational metadata.",
    },
]

app = FastAPI(
    title="PrivGuard Privacy Engine",
    description="""
    **Privacy & Risk Classification** for user-authored payloads.

    * **Detection:** PII and sensitive-content matchers over every string in the payload.
    * **Risk score:** Severity-weighted, bounded 0-100.
    * **Decision:** PUBLIC / CONFIDENTIAL / RESTRICTED with ALLOW / ENCRYPT / ANONYMIZE / REJECT.
    """,
    version="1.0.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc"
)

init_telemetry()

validator = PrivacyValidator(config_store=ConfigStore(load_config_from_env()))


@app.middleware("http")
async def audit_middleware(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    client_host = request.client.host if request.client else "unknown"
    audit_logger.info(
        f"METHOD={request.method} PATH={request.url.path} "
        f"STATUS={response.status_code} CLIENT={client_host} "
        f"DURATION={process_time:.4f}s"
    )
    return response


# --- DATA MODELS ---
class ValidateRequest(BaseModel):
    payload: Any = None
    context: Optional[str] = None


class ViolationModel(BaseModel):
    kind: str
    field: str
    severity: str
    path: str
    description: str
    value: Optional[str] = None


class ValidationResponse(BaseModel):
    is_compliant: bool
    violations: list[ViolationModel]
    risk_score: int
    data_classification: str
    processing_recommendation: str
    anonymization_required: bool
    error: Optional[str] = None
    reasons: list[str] = []
    sensitive_fields: list[str] = []


class ReportResponse(BaseModel):
    summary: str
    recommendations: list[str]
    risk_assessment: str
    next_steps: list[str]


# --- ENDPOINTS ---

@app.post("/validate", response_model=ValidationResponse, tags=["Validation"])
def validate_payload(request: ValidateRequest):
    """
    Validate a payload. Always answers 200; uninspectable data comes back
    as RESTRICTED / REJECT.
    """
    return validator.validate(request.payload, request.context).to_dict()


@app.post("/report", response_model=ReportResponse, tags=["Validation"])
def report_payload(request: ValidateRequest):
    return validator.generate_report(request.payload, request.context).to_dict()


@app.get("/config", tags=["Configuration"])
def read_config():
    return validator.get_config().to_public_dict()


@app.patch("/config", tags=["Configuration"])
def patch_config(changes: Dict[str, Any]):
    """
    Merge the supplied fields into the active configuration.
    Rejected updates leave the previous configuration in place.
    """
    try:
        updated = validator.update_config(changes)
    except ConfigUpdateError as e:
        audit_logger.warning("CONFIG_UPDATE_REJECTED")
        raise HTTPException(status_code=400, detail=str(e))
    return updated.to_public_dict()


@app.get("/health", tags=["System"])
def health():
    return {
        "status": "online",
        "modules": ["Detection", "Scoring", "Classifier", "Reporting", "AuditLog"]
    }
