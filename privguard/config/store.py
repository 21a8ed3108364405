import logging
import threading
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from privguard.config.validator_config import ValidatorConfig
from privguard.errors import ConfigUpdateError

logger = logging.getLogger("privguard.config")


def _field_name(key: str) -> str:
    fields = ValidatorConfig.model_fields
    if key in fields:
        return key
    for name, info in fields.items():
        if info.alias == key:
            return name
    raise ConfigUpdateError(f"Unknown configuration field: {key}")


class ConfigStore:
    """
    Holds the active ValidatorConfig.

    Readers take a snapshot (a single reference read). Writers merge under a
    lock and swap the reference, so no reader ever sees a half-applied update.
    """

    def __init__(self, initial: Optional[ValidatorConfig] = None):
        self._config = initial if initial is not None else ValidatorConfig()
        self._write_lock = threading.Lock()

    def snapshot(self) -> ValidatorConfig:
        return self._config

    def update(self, changes: Optional[Mapping[str, Any]] = None, **fields: Any) -> ValidatorConfig:
        """
        Merge the supplied fields over the current configuration.
        Fields not supplied keep their current values.
        """
        merged: Dict[str, Any] = {}
        for key, value in {**(changes or {}), **fields}.items():
            merged[_field_name(key)] = value

        with self._write_lock:
            current = self._config
            try:
                candidate = ValidatorConfig.model_validate({**current.model_dump(), **merged})
            except ValidationError as e:
                logger.warning("Rejected configuration update for fields: %s", sorted(merged))
                raise ConfigUpdateError(str(e)) from e

            self._config = candidate

        logger.info("Configuration updated: %s", sorted(merged))
        return candidate

    def reset(self, config: Optional[ValidatorConfig] = None) -> ValidatorConfig:
        with self._write_lock:
            self._config = config if config is not None else ValidatorConfig()
            return self._config
