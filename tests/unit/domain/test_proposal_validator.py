"""Validator tests: key range and caller identity."""

import pytest

from proposal_registry.domain.exceptions import DomainValidationError, InvalidKeyError
from proposal_registry.domain.validators.proposal_validator import (
    KEY_MAX,
    validate_caller_id,
    validate_key,
)


@pytest.mark.parametrize("key", [0, 1, 2**63, KEY_MAX])
def test_validate_key_accepts_uint64(key):
    validate_key(key)


@pytest.mark.parametrize("key", [-1, KEY_MAX + 1])
def test_validate_key_rejects_out_of_range(key):
    with pytest.raises(InvalidKeyError) as exc_info:
        validate_key(key)
    assert str(key) in exc_info.value.message


def test_validate_key_rejects_non_integers():
    with pytest.raises(InvalidKeyError):
        validate_key("1")
    with pytest.raises(InvalidKeyError):
        validate_key(True)


def test_invalid_key_is_a_validation_error():
    assert issubclass(InvalidKeyError, DomainValidationError)


def test_validate_caller_id_rejects_blank():
    with pytest.raises(DomainValidationError):
        validate_caller_id("")
    with pytest.raises(DomainValidationError):
        validate_caller_id("   ")
    validate_caller_id("principal-abc")
