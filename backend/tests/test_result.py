"""
Violet API Backend - Outcome Envelope Tests
============================================
"""

import pytest

from violet.core.result import Failure, InvalidOutcomeError, Success, fail, ok
from violet.exceptions import NotFoundError, ValidationError


class TestOk:

    def test_defaults_to_200_without_value(self):
        outcome = ok()

        assert outcome == Success(status_code=200, value=None)
        assert outcome.is_success is True
        assert outcome.is_failure is False

    def test_custom_status_and_value(self):
        outcome = ok({"id": "1"}, status_code=201)

        assert outcome.status_code == 201
        assert outcome.get_value() == {"id": "1"}


class TestFail:

    @pytest.mark.parametrize(
        "error, expected",
        [
            (NotFoundError("client", "9"), 404),
            (ValidationError("bad input"), 400),
            (RuntimeError("boom"), 500),
            ("plain string error", 500),
        ],
    )
    def test_status_taken_from_error(self, error, expected):
        assert fail(error).status_code == expected

    def test_explicit_status_wins(self):
        outcome = fail(NotFoundError("client"), status_code=410)

        assert outcome.status_code == 410

    def test_value_is_the_error(self):
        error = ValidationError("bad input")
        outcome = fail(error)

        assert isinstance(outcome, Failure)
        assert outcome.is_failure is True
        assert outcome.get_value() is error

    def test_failure_requires_an_error(self):
        with pytest.raises(InvalidOutcomeError):
            Failure(status_code=500, error=None)

    def test_outcomes_are_immutable(self):
        outcome = ok("value")

        with pytest.raises(AttributeError):
            outcome.status_code = 500
