"""Tests for the error hierarchy and messages."""

import pytest

from clipolicy import AtLeast
from clipolicy import Exact
from clipolicy import MissingRequiredError
from clipolicy import OptionConflictError
from clipolicy import OptionError
from clipolicy import OptParseError
from clipolicy import ParseError
from clipolicy import PolicyViolationError
from clipolicy import UnexpectedValueError
from clipolicy import UnknownOptionError


class TestMessages:
    """Test rendered error text."""

    def test_unknown_option(self):
        assert str(UnknownOptionError("--nope")) == "no such option: --nope"

    def test_unexpected_value(self):
        err = UnexpectedValueError("stray")
        assert err.value == "stray"
        assert str(err) == "unexpected argument: 'stray'"

    def test_missing_required_defaults_to_name(self):
        assert str(MissingRequiredError("output")) == "missing required option: output"

    def test_policy_violation(self):
        err = PolicyViolationError("output", Exact(1), 2, "--output")
        assert str(err) == "option --output expects exactly 1 value, got 2"

    def test_policy_violation_plural(self):
        err = PolicyViolationError("(unnamed)", AtLeast(2), 1)
        assert str(err) == "option (unnamed) expects at least 2 values, got 1"

    def test_option_error_without_id(self):
        assert str(OptionError("bad", "")) == "bad"


class TestHierarchy:
    """Test which errors callers can catch together."""

    @pytest.mark.parametrize(
        "err",
        [
            UnknownOptionError("-x"),
            UnexpectedValueError("x"),
            MissingRequiredError("output"),
            PolicyViolationError("output", Exact(1), 0),
        ],
    )
    def test_parse_errors(self, err):
        assert isinstance(err, ParseError)
        assert isinstance(err, OptParseError)

    def test_declaration_errors_are_not_parse_errors(self):
        err = OptionConflictError("conflict", "-o/--output")
        assert isinstance(err, OptionError)
        assert not isinstance(err, ParseError)
