"""
Value-arity policies.

A policy decides how many plain-value tokens an option claims once it
has been matched on the command line:

  Exact(n)          exactly n values
  AtLeast(n)        n or more values
  AtMost(n)         up to n values, zero included
  Final()           every remaining token, flags included
  FinalizeIgnore()  like Final(), and the parse skips the
                    required-option check
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar
from typing import Union


def _plural(n: int) -> str:
    return f"{n} value" if n == 1 else f"{n} values"


@dataclass(frozen=True)
class _Counted:
    n: int

    def __post_init__(self) -> None:
        if not isinstance(self.n, int) or isinstance(self.n, bool):
            raise TypeError(f"value count must be an int, not {self.n!r}")
        if self.n < 0:
            raise ValueError(f"value count must not be negative: {self.n}")

    is_final: ClassVar[bool] = False
    ignores_required: ClassVar[bool] = False


@dataclass(frozen=True)
class Exact(_Counted):
    def accepts(self, count: int) -> bool:
        return count == self.n

    @property
    def takes_values(self) -> bool:
        return self.n > 0

    def describe(self) -> str:
        return f"exactly {_plural(self.n)}"


@dataclass(frozen=True)
class AtLeast(_Counted):
    def accepts(self, count: int) -> bool:
        return count >= self.n

    @property
    def takes_values(self) -> bool:
        return True

    def describe(self) -> str:
        return f"at least {_plural(self.n)}"


@dataclass(frozen=True)
class AtMost(_Counted):
    def accepts(self, count: int) -> bool:
        return count <= self.n

    @property
    def takes_values(self) -> bool:
        return self.n > 0

    def describe(self) -> str:
        return f"at most {_plural(self.n)}"


@dataclass(frozen=True)
class Final:
    is_final: ClassVar[bool] = True
    ignores_required: ClassVar[bool] = False

    def accepts(self, count: int) -> bool:
        return True

    @property
    def takes_values(self) -> bool:
        return True

    def describe(self) -> str:
        return "all remaining values"


@dataclass(frozen=True)
class FinalizeIgnore(Final):
    ignores_required: ClassVar[bool] = True


OptionPolicy = Union[Exact, AtLeast, AtMost, Final, FinalizeIgnore]

POLICY_TYPES: tuple[type, ...] = (Exact, AtLeast, AtMost, Final, FinalizeIgnore)
