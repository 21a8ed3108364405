import os
from typing import Any, Dict

from dotenv import load_dotenv
from pydantic import ValidationError

from privguard.config.validator_config import ValidatorConfig
from privguard.errors import ConfigUpdateError

ENV_PREFIX = "PRIVGUARD_"

_ENV_FIELDS = {
    "STRICT_MODE": "strict_mode",
    "ALLOWED_DATA_TYPES": "allowed_data_types",
    "MAX_DATA_SIZE": "max_data_size",
    "REQUIRE_ENCRYPTION": "require_encryption",
    "LOG_VIOLATIONS": "log_violations",
    "ENCRYPT_SCORE_THRESHOLD": "encrypt_score_threshold",
}


def load_config_from_env() -> ValidatorConfig:
    """
    Build a ValidatorConfig from PRIVGUARD_* environment variables
    (and a .env file, if present) on top of the defaults.
    """
    load_dotenv()

    values: Dict[str, Any] = {}
    for suffix, field in _ENV_FIELDS.items():
        raw = os.getenv(ENV_PREFIX + suffix)
        if raw is None or raw.strip() == "":
            continue
        if field == "allowed_data_types":
            values[field] = frozenset(t.strip() for t in raw.split(",") if t.strip())
        else:
            values[field] = raw.strip()

    try:
        return ValidatorConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigUpdateError(str(e)) from e
