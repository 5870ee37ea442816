"""Pytest configuration and fixtures for clipolicy tests."""

import pytest

from clipolicy import UNNAMED
from clipolicy import AtLeast
from clipolicy import Exact
from clipolicy import Final
from clipolicy import FinalizeIgnore
from clipolicy import OptionSpec
from clipolicy import OptionTable


@pytest.fixture
def switches():
    """Table with two zero-value short flags."""
    return OptionTable(
        [
            OptionSpec("r", "recursive", "Searches recursive", False, Exact(0)),
            OptionSpec("v", "verbose", "Shows verbose output", False, Exact(0)),
        ]
    )


@pytest.fixture
def search_table():
    """Table modelled on a typical file search tool."""
    return OptionTable(
        [
            OptionSpec(None, UNNAMED, "Unnamed arguments", True, AtLeast(1)),
            OptionSpec("r", "recursive", "Searches recursive", False, Exact(0)),
            OptionSpec("o", "output", "Specifies output file", False, Exact(1)),
            OptionSpec("v", "verbose", "Shows verbose output", False, Exact(1)),
            OptionSpec("n", "number", "The number of iterations to perform", False, Exact(1)),
        ]
    )


@pytest.fixture
def help_table():
    """Table with a required option and a help override."""
    return OptionTable(
        [
            OptionSpec("o", "output", "Specifies output file", True, Exact(1)),
            OptionSpec("h", "help", "Display a help screen", False, FinalizeIgnore()),
            OptionSpec("x", "exec", "Command to run", False, Final()),
        ]
    )
