from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Primitive type names a payload leaf may carry
KNOWN_DATA_TYPES = frozenset({"string", "number", "boolean", "null"})


class ValidatorConfig(BaseModel):
    """
    Immutable policy snapshot read by every validation call.

    Field names are accepted in snake_case or camelCase
    (`max_data_size` / `maxDataSize`).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    strict_mode: bool = True
    allowed_data_types: FrozenSet[str] = frozenset({"string", "number", "boolean"})
    max_data_size: int = Field(default=50000, ge=0)
    require_encryption: bool = False
    log_violations: bool = True
    # ALLOW / ENCRYPT boundary for scores with no anonymize-triggering kind
    encrypt_score_threshold: int = Field(default=25, ge=0, le=100)

    @field_validator("allowed_data_types")
    @classmethod
    def _known_types_only(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        unknown = sorted(set(value) - KNOWN_DATA_TYPES)
        if unknown:
            raise ValueError(f"Unknown data types: {', '.join(unknown)}")
        return value

    def to_public_dict(self) -> dict:
        data = self.model_dump(by_alias=True, mode="json")
        data["allowedDataTypes"] = sorted(self.allowed_data_types)
        return data
