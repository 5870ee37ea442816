from __future__ import annotations

from clipolicy.parser.errors import MissingRequiredError
from clipolicy.parser.errors import OptionConflictError
from clipolicy.parser.errors import OptionError
from clipolicy.parser.errors import OptParseError
from clipolicy.parser.errors import ParseError
from clipolicy.parser.errors import PolicyViolationError
from clipolicy.parser.errors import UnexpectedValueError
from clipolicy.parser.errors import UnknownOptionError
from clipolicy.parser.formatters import UsageFormatter
from clipolicy.parser.formatters import format_error
from clipolicy.parser.formatters import format_usage
from clipolicy.parser.optparser import UNNAMED
from clipolicy.parser.optparser import Config
from clipolicy.parser.optparser import OptionSpec
from clipolicy.parser.optparser import OptionTable
from clipolicy.parser.optparser import ScanState
from clipolicy.parser.optparser import parse_args
from clipolicy.parser.policies import AtLeast
from clipolicy.parser.policies import AtMost
from clipolicy.parser.policies import Exact
from clipolicy.parser.policies import Final
from clipolicy.parser.policies import FinalizeIgnore
from clipolicy.parser.policies import OptionPolicy


__all__ = [
    "UNNAMED",
    "AtLeast",
    "AtMost",
    "Config",
    "Exact",
    "Final",
    "FinalizeIgnore",
    "MissingRequiredError",
    "OptParseError",
    "OptionConflictError",
    "OptionError",
    "OptionPolicy",
    "OptionSpec",
    "OptionTable",
    "ParseError",
    "PolicyViolationError",
    "ScanState",
    "UnexpectedValueError",
    "UnknownOptionError",
    "UsageFormatter",
    "format_error",
    "format_usage",
    "parse_args",
]
