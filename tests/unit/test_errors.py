"""Tests for the unwrap misuse errors."""

import pytest

from okfail import (
    Fail,
    NoFailureValueError,
    NoSuccessValueError,
    Ok,
    UnwrapError,
    UnwrapErrorKind,
)


class TestUnwrapErrorKind:
    def test_exactly_two_kinds(self):
        assert set(UnwrapErrorKind) == {
            UnwrapErrorKind.NO_SUCCESS_VALUE,
            UnwrapErrorKind.NO_FAILURE_VALUE,
        }

    def test_values_are_fixed_messages(self):
        assert UnwrapErrorKind.NO_SUCCESS_VALUE.value == "Cannot unwrap a failed result"
        assert UnwrapErrorKind.NO_FAILURE_VALUE.value == "Cannot unwrap_failure a successful result"


class TestNoSuccessValueError:
    def test_carries_kind_and_message(self):
        err = NoSuccessValueError()
        assert err.kind is UnwrapErrorKind.NO_SUCCESS_VALUE
        assert err.message == str(err) == "Cannot unwrap a failed result"

    def test_raised_by_unwrap_on_failure(self):
        with pytest.raises(NoSuccessValueError) as exc_info:
            Fail("x").unwrap()
        assert exc_info.value.kind is UnwrapErrorKind.NO_SUCCESS_VALUE


class TestNoFailureValueError:
    def test_carries_kind_and_message(self):
        err = NoFailureValueError()
        assert err.kind is UnwrapErrorKind.NO_FAILURE_VALUE
        assert str(err) == "Cannot unwrap_failure a successful result"

    def test_raised_by_unwrap_failure_on_success(self):
        with pytest.raises(NoFailureValueError):
            Ok(1).unwrap_failure()


class TestHierarchy:
    def test_both_are_unwrap_errors(self):
        assert issubclass(NoSuccessValueError, UnwrapError)
        assert issubclass(NoFailureValueError, UnwrapError)

    def test_distinguishable(self):
        assert not issubclass(NoSuccessValueError, NoFailureValueError)
        assert not issubclass(NoFailureValueError, NoSuccessValueError)

    def test_catchable_as_base(self):
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_failure()
        with pytest.raises(UnwrapError):
            Fail(1).unwrap()

    def test_fresh_instance_per_raise(self):
        assert NoSuccessValueError() is not NoSuccessValueError()
