import threading

import pytest

from privguard import validator as module
from privguard.config.store import ConfigStore
from privguard.config.validator_config import ValidatorConfig
from privguard.errors import ConfigUpdateError


def test_defaults():
    config = ValidatorConfig()

    assert config.strict_mode is True
    assert config.allowed_data_types == frozenset({"string", "number", "boolean"})
    assert config.max_data_size == 50000
    assert config.require_encryption is False
    assert config.log_violations is True
    assert config.encrypt_score_threshold == 25


def test_merge_overwrites_only_supplied_fields():
    store = ConfigStore()
    before = store.snapshot()

    after = store.update(max_data_size=1234)

    assert after.max_data_size == 1234
    assert after.model_dump(exclude={"max_data_size"}) == before.model_dump(exclude={"max_data_size"})
    assert store.snapshot() is after


def test_camel_case_aliases_are_accepted():
    store = ConfigStore()
    store.update({"maxDataSize": 10, "requireEncryption": True, "allowedDataTypes": ["string"]})

    config = store.snapshot()
    assert config.max_data_size == 10
    assert config.require_encryption is True
    assert config.allowed_data_types == frozenset({"string"})


@pytest.mark.parametrize("changes", [
    {"max_data_size": -1},
    {"encrypt_score_threshold": 101},
    {"allowed_data_types": ["string", "blob"]},
    {"strict_mode": "sometimes"},
    {"not_a_field": 1},
])
def test_rejected_update_keeps_previous_config(changes):
    store = ConfigStore()
    before = store.snapshot()

    with pytest.raises(ConfigUpdateError):
        store.update(changes)

    assert store.snapshot() is before


def test_config_snapshot_is_immutable():
    config = ValidatorConfig()
    with pytest.raises(Exception):
        config.max_data_size = 1


def test_public_dict_uses_camel_case():
    data = ValidatorConfig().to_public_dict()

    assert data["maxDataSize"] == 50000
    assert data["allowedDataTypes"] == ["boolean", "number", "string"]
    assert "max_data_size" not in data


def test_readers_never_observe_a_mixed_config():
    small = ValidatorConfig(max_data_size=10, log_violations=False, strict_mode=False)
    large = ValidatorConfig(max_data_size=99999, log_violations=True, strict_mode=True)
    store = ConfigStore(small)
    stop = threading.Event()
    mixed = []

    def writer():
        flip = True
        while not stop.is_set():
            target = large if flip else small
            store.update(target.model_dump())
            flip = not flip

    def reader():
        for _ in range(2000):
            config = store.snapshot()
            if config != small and config != large:
                mixed.append(config)

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads[1:]:
        t.join()
    stop.set()
    threads[0].join()

    assert mixed == []


def test_module_level_shortcuts_share_one_validator():
    original = module.get_config()
    try:
        module.update_config(maxDataSize=5, logViolations=False)

        assert module.get_config().max_data_size == 5
        assert module.get_config().allowed_data_types == original.allowed_data_types
        result = module.validate({"content": "more than five bytes"})
        assert any(v.field == "size" for v in result.violations)
        assert "Risk score" in module.generate_report(None).summary
    finally:
        module.privacy_validator.config_store.reset(original)
