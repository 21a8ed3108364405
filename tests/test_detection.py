import json

import pytest

from privguard.config.validator_config import ValidatorConfig
from privguard.detection.detector import canonical_size, detect, mask_value, scan_text
from privguard.errors import CyclicPayloadError
from privguard.models.violation import ViolationKind, ViolationSeverity
from fixtures.payloads import (
    EMAIL_ONLY,
    EMPTY_PAYLOADS,
    MULTI_PII,
    NESTED,
    PHONE_ONLY,
    RECOVERY_NOTES,
    ROUTINE,
)

CONFIG = ValidatorConfig()


def fields(violations):
    return [v.field for v in violations]


def test_single_email_yields_one_high_pii_violation():
    violations = detect(EMAIL_ONLY, CONFIG)

    assert len(violations) == 1
    v = violations[0]
    assert v.kind == ViolationKind.PII_DETECTED
    assert v.field == "email"
    assert v.severity == ViolationSeverity.HIGH
    assert v.path == "$.message"
    assert "john.doe" not in v.description
    assert v.value == "jo****************om"


def test_phone_detection():
    violations = detect(PHONE_ONLY, CONFIG)
    assert fields(violations) == ["phone"]


@pytest.mark.parametrize("text", [
    "555-123-4567",
    "(555) 123-4567",
    "+1 555.123.4567",
    "call 555 123 4567 now",
])
def test_phone_formats(text):
    assert "phone" in fields(scan_text(text, "$"))


def test_ssn_is_not_mistaken_for_phone():
    assert fields(scan_text("123-45-6789", "$")) == ["ssn"]


def test_multiple_pii_types_in_one_string():
    violations = detect(MULTI_PII, CONFIG)
    assert fields(violations) == ["email", "phone", "ssn", "name"]


def test_sensitive_recovery_content():
    violations = detect(RECOVERY_NOTES, CONFIG)

    assert all(v.kind == ViolationKind.SENSITIVE_CONTENT for v in violations)
    assert fields(violations) == ["explicitContent", "relapseTerms"]
    assert all(v.severity == ViolationSeverity.HIGH for v in violations)


def test_time_and_routine_patterns_are_medium():
    violations = detect(ROUTINE, CONFIG)
    by_field = {v.field: v for v in violations}

    assert by_field["timePatterns"].severity == ViolationSeverity.MEDIUM
    assert by_field["routinePatterns"].severity == ViolationSeverity.MEDIUM
    assert by_field["relapseTerms"].severity == ViolationSeverity.HIGH


def test_nested_structure_is_scanned_everywhere():
    violations = detect(NESTED, CONFIG)

    assert [(v.field, v.path) for v in violations] == [
        ("email", "$.user.profile.contact.email"),
        ("relapseTerms", "$.user.recovery.notes[0]"),
        ("explicitContent", "$.user.recovery.progress.setbacks[0]"),
        ("behavioralTerms", "$.user.recovery.progress.setbacks[1]"),
    ]


def test_keyword_matching_respects_word_boundaries():
    assert scan_text("x" * 100, "$") == []
    assert scan_text("my setbacks list", "$") == []
    assert fields(scan_text("NSFW link", "$")) == ["explicitContent"]


@pytest.mark.parametrize("payload", EMPTY_PAYLOADS)
def test_empty_payloads_yield_nothing(payload):
    assert detect(payload, ValidatorConfig(max_data_size=0)) == []


def test_size_exceeded():
    payload = {"content": "x" * 60000}
    violations = detect(payload, CONFIG)

    assert len(violations) == 1
    v = violations[0]
    assert v.kind == ViolationKind.SIZE_EXCEEDED
    assert v.field == "size"
    assert v.severity == ViolationSeverity.MEDIUM


def test_size_limit_is_exclusive():
    payload = {"content": "abc"}
    size = canonical_size(payload)

    assert detect(payload, ValidatorConfig(max_data_size=size)) == []
    assert fields(detect(payload, ValidatorConfig(max_data_size=size - 1))) == ["size"]


def test_canonical_size_counts_utf8_bytes():
    payload = {"k": "é"}
    assert canonical_size(payload) == len(json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8"))
    assert canonical_size(payload) == 10


def test_size_check_runs_first():
    payload = {"content": "john@example.com " + "y" * 200}
    violations = detect(payload, ValidatorConfig(max_data_size=100))
    assert fields(violations) == ["size", "email"]


def test_cyclic_payload_raises():
    payload = {"name": "test"}
    payload["self"] = payload

    with pytest.raises(CyclicPayloadError):
        detect(payload, CONFIG)


def test_unserializable_payload_raises():
    with pytest.raises(TypeError):
        detect({"tags": {"a", "b"}}, CONFIG)


def test_detection_is_deterministic():
    assert detect(NESTED, CONFIG) == detect(NESTED, CONFIG)


@pytest.mark.parametrize("text, field", [
    ("card 4111 1111 1111 1111 on file", "creditCard"),
    ("card 4111-1111-1111-1111", "creditCard"),
    ("born 01/15/1990", "dateOfBirth"),
    ("logged in from 192.168.1.10", "ipAddress"),
    ("lives at 221 Baker Street", "address"),
    ("license D1234567", "driverLicense"),
    ("device 00:1A:2B:3C:4D:5E", "macAddress"),
    ("see https://example.com/profile", "url"),
])
def test_extended_pii_matchers(text, field):
    assert field in fields(scan_text(text, "$"))


@pytest.mark.parametrize("text", [
    "version 1.2.3",
    "999.999.999.999",
    "we met at 11:30 PM",
    "ordered 3 items",
])
def test_extended_matchers_ignore_ordinary_text(text):
    assert not {"creditCard", "dateOfBirth", "ipAddress", "address"} & set(fields(scan_text(text, "$")))


def test_pii_value_is_masked():
    violations = scan_text("SSN: 123-45-6789", "$.notes")

    assert [(v.field, v.value) for v in violations] == [("ssn", "12*******89")]


def test_mask_value():
    assert mask_value("abcdef") == "ab**ef"
    assert mask_value("abcde") == "ab*de"
    assert mask_value("abcd") == "****"
    assert mask_value("ab") == "****"


def test_sensitive_content_carries_no_value():
    violations = scan_text("I relapsed yesterday", "$")

    assert [v.field for v in violations] == ["relapseTerms"]
    assert violations[0].value is None


def test_canonical_size_matches_json_dumps_on_mixed_payload():
    payload = {"s": "text", 1: [1, 2.5, True, None], "nested": {"k": ["é", {}]}, False: ()}
    expected = json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")

    assert canonical_size(payload) == len(expected)


def test_deeply_nested_payload_is_sized_and_scanned():
    payload = "hello"
    for _ in range(1500):
        payload = [payload]

    assert canonical_size(payload) == 1500 * 2 + len('"hello"')
    assert detect(payload, CONFIG) == []


def test_nan_has_no_json_rendering():
    with pytest.raises(ValueError):
        detect({"score": float("nan")}, CONFIG)
