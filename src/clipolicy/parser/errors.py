from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from clipolicy.parser.optparser import OptionSpec
    from clipolicy.parser.policies import OptionPolicy


class OptParseError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class OptionError(OptParseError):
    """
    Raised if an OptionSpec is declared with invalid or
    inconsistent arguments.
    """

    def __init__(self, msg: str, option: OptionSpec | str) -> None:
        super().__init__(msg)
        self.option_id = str(option)

    def __str__(self) -> str:
        if self.option_id:
            return f"option {self.option_id}: {self.msg}"
        return self.msg


class OptionConflictError(OptionError):
    """
    Raised if two specs of one table share a short or long name.
    """


class ParseError(OptParseError):
    """
    Base class for failures while walking the argument tokens.
    """


class UnknownOptionError(ParseError):
    """
    Raised if a long name or short character matches no spec.
    """

    def __init__(self, opt_str: str) -> None:
        self.opt_str = opt_str
        super().__init__(f"no such option: {opt_str}")


class UnexpectedValueError(ParseError):
    """
    Raised if a plain value is seen but no option can take it.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unexpected argument: {value!r}")


class MissingRequiredError(ParseError):
    def __init__(self, option_name: str, opt_str: str | None = None) -> None:
        self.option_name = option_name
        super().__init__(f"missing required option: {opt_str or option_name}")


class PolicyViolationError(ParseError):
    """
    Raised if an option received a number of values its policy
    does not accept.
    """

    def __init__(
        self,
        option_name: str,
        policy: OptionPolicy,
        count: int,
        opt_str: str | None = None,
    ) -> None:
        self.option_name = option_name
        self.policy = policy
        self.count = count
        super().__init__(
            f"option {opt_str or option_name} expects {policy.describe()}, got {count}"
        )
