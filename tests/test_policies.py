"""Tests for value-arity policies."""

import pytest

from clipolicy import AtLeast
from clipolicy import AtMost
from clipolicy import Exact
from clipolicy import Final
from clipolicy import FinalizeIgnore


class TestAccepts:
    """Test which value counts each policy accepts."""

    def test_exact(self):
        assert Exact(1).accepts(1)
        assert not Exact(1).accepts(0)
        assert not Exact(1).accepts(2)

    def test_at_least(self):
        assert not AtLeast(2).accepts(1)
        assert AtLeast(2).accepts(2)
        assert AtLeast(2).accepts(10)

    def test_at_most(self):
        assert AtMost(1).accepts(0)
        assert AtMost(1).accepts(1)
        assert not AtMost(1).accepts(2)

    def test_final_accepts_anything(self):
        assert Final().accepts(0)
        assert FinalizeIgnore().accepts(42)


class TestFlags:
    """Test the behavior flags exposed by policies."""

    @pytest.mark.parametrize("policy", [Exact(0), AtMost(0)])
    def test_zero_maximum_takes_no_values(self, policy):
        assert not policy.takes_values

    @pytest.mark.parametrize("policy", [Exact(1), AtLeast(0), AtMost(3), Final()])
    def test_takes_values(self, policy):
        assert policy.takes_values

    def test_final_flags(self):
        assert Final().is_final
        assert not Final().ignores_required
        assert FinalizeIgnore().is_final
        assert FinalizeIgnore().ignores_required
        assert not Exact(1).is_final
        assert not AtLeast(1).ignores_required

    def test_final_variants_differ(self):
        assert Final() != FinalizeIgnore()
        assert Exact(2) == Exact(2)
        assert Exact(2) != AtLeast(2)


class TestValidation:
    """Test policy construction checks."""

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            Exact(-1)

    def test_non_int_count_rejected(self):
        with pytest.raises(TypeError):
            AtMost("2")


class TestDescribe:
    """Test the human readable policy text."""

    @pytest.mark.parametrize(
        "policy, text",
        [
            (Exact(1), "exactly 1 value"),
            (Exact(0), "exactly 0 values"),
            (AtLeast(2), "at least 2 values"),
            (AtMost(1), "at most 1 value"),
            (Final(), "all remaining values"),
            (FinalizeIgnore(), "all remaining values"),
        ],
    )
    def test_describe(self, policy, text):
        assert policy.describe() == text
