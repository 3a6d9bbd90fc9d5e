"""Tests for error normalization and retry policy."""

import pytest

from safeplots.query import QueryError, RetryPolicy, normalize_error
from safeplots.query.errors import error_message


def test_exception_is_kept():
    error = ValueError("bad")
    assert normalize_error(error) is error


@pytest.mark.parametrize("failure", ["rejected", None, 42, {"code": "X"}])
def test_non_exception_is_wrapped(failure):
    error = normalize_error(failure)

    assert isinstance(error, QueryError)
    assert str(error) == "An error occurred"
    assert error.cause == failure


def test_error_message_fallback():
    assert error_message(RuntimeError("boom"), "fallback") == "boom"
    assert error_message(RuntimeError(), "fallback") == "fallback"


def test_retry_policy_max_attempts():
    policy = RetryPolicy(retry_count=3, delay=1.0)

    assert policy.max_attempts == 4


def test_retry_policy_validation():
    with pytest.raises(ValueError):
        RetryPolicy(retry_count=-1)
    with pytest.raises(ValueError):
        RetryPolicy(delay=-0.5)
