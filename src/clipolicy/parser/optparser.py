from __future__ import annotations

import enum
import logging
import sys

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import overload

from clipolicy.parser.errors import MissingRequiredError
from clipolicy.parser.errors import OptionConflictError
from clipolicy.parser.errors import OptionError
from clipolicy.parser.errors import PolicyViolationError
from clipolicy.parser.errors import UnexpectedValueError
from clipolicy.parser.errors import UnknownOptionError
from clipolicy.parser.policies import POLICY_TYPES
from clipolicy.parser.policies import Exact
from clipolicy.parser.policies import OptionPolicy


if TYPE_CHECKING:
    from clipolicy.parser.formatters import UsageFormatter


logger = logging.getLogger(__name__)

# Long name of the spec that collects values not preceded by any flag.
UNNAMED: str = "(unnamed)"


def _repr(self):
    return f"<{self.__class__.__name__} at 0x{id(self):x}: {self}>"


@dataclass(frozen=True)
class OptionSpec:
    """
    One declared option.

    Instance attributes:
      short : string | None
        single character used as ``-x``; None for no short form
      long : string
        name used as ``--name`` and as key of the parsed Config
      description : string
        text shown in usage, no effect on parsing
      required : bool
        the option must appear at least once
      policy : OptionPolicy
        how many values the option claims once matched
    """

    short: str | None
    long: str
    description: str = ""
    required: bool = False
    policy: OptionPolicy = field(default_factory=lambda: Exact(0))

    def __post_init__(self) -> None:
        if not isinstance(self.long, str) or not self.long:
            raise OptionError("long name must be a non-empty string", repr(self.long))
        if self.long.startswith("-"):
            raise OptionError(
                f"invalid long name {self.long!r}: must not start with a dash",
                self.long,
            )
        if self.short is not None:
            if not isinstance(self.short, str) or len(self.short) != 1:
                raise OptionError(
                    f"invalid short name {self.short!r}: must be a single character",
                    self.long,
                )
            if self.short == "-":
                raise OptionError("short name must not be a dash", self.long)
            if self.is_unnamed:
                raise OptionError("the unnamed option takes no short name", self.long)
        if not isinstance(self.policy, POLICY_TYPES):
            raise OptionError(f"invalid policy: {self.policy!r}", self.long)

    @property
    def is_unnamed(self) -> bool:
        return self.long == UNNAMED

    @property
    def short_opts(self) -> list[str]:
        return [f"-{self.short}"] if self.short else []

    @property
    def long_opts(self) -> list[str]:
        return [] if self.is_unnamed else [f"--{self.long}"]

    def get_opt_string(self) -> str:
        if self.is_unnamed:
            return self.long
        return f"--{self.long}"

    def __str__(self) -> str:
        return "/".join(self.short_opts + self.long_opts) or self.long


class OptionTable(Sequence[OptionSpec]):
    """
    Ordered, read-only collection of OptionSpec.

    Instance attributes:
      _specs : [OptionSpec]
        the specs in declaration order
      _short_opt : { string : OptionSpec }
        maps a short character, eg. "o", to its spec
      _long_opt : { string : OptionSpec }
        maps a long name, eg. "output", to its spec
    """

    def __init__(self, specs: Iterable[OptionSpec] = ()) -> None:
        self._specs: list[OptionSpec] = []
        self._short_opt: dict[str, OptionSpec] = {}
        self._long_opt: dict[str, OptionSpec] = {}

        for spec in specs:
            self._add_spec(spec)

    def _check_conflict(self, spec: OptionSpec) -> None:
        conflict_opts = []
        if spec.short is not None and spec.short in self._short_opt:
            conflict_opts.append(f"-{spec.short}")
        if spec.long in self._long_opt:
            conflict_opts.append(spec.get_opt_string())

        if conflict_opts:
            raise OptionConflictError(
                f"conflicting option string(s): {', '.join(conflict_opts)}", spec
            )

    def _add_spec(self, spec: OptionSpec) -> None:
        if not isinstance(spec, OptionSpec):
            raise TypeError(f"not an OptionSpec instance: {spec!r}")

        self._check_conflict(spec)

        self._specs.append(spec)
        if spec.short is not None:
            self._short_opt[spec.short] = spec
        self._long_opt[spec.long] = spec

    @overload
    def __getitem__(self, index: int) -> OptionSpec:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[OptionSpec]:
        ...

    def __getitem__(self, index):
        return self._specs[index]

    def __len__(self) -> int:
        return len(self._specs)

    def __str__(self) -> str:
        return ", ".join(str(spec) for spec in self._specs)

    __repr__ = _repr

    # -- Lookup methods ------------------------------------------------

    def find_short(self, ch: str) -> OptionSpec | None:
        return self._short_opt.get(ch)

    def find_long(self, name: str) -> OptionSpec | None:
        return self._long_opt.get(name)

    @property
    def unnamed(self) -> OptionSpec | None:
        return self._long_opt.get(UNNAMED)

    # -- Usage methods -------------------------------------------------

    def generate_usage(
        self,
        list_required: bool = True,
        list_unrequired: bool = True,
        formatter: UsageFormatter | None = None,
    ) -> str:
        from clipolicy.parser.formatters import UsageFormatter

        formatter = formatter or UsageFormatter()
        return formatter.format_usage(self, list_required, list_unrequired)


class Config(Mapping[str, tuple[str, ...]]):
    """
    The result of a successful parse: option long name -> values.

    An option that was supplied without values maps to an empty tuple;
    an option that was not supplied at all has no key.
    """

    def __init__(
        self,
        values: Mapping[str, Iterable[str]] | None = None,
        program: str | None = None,
    ) -> None:
        self._values: dict[str, tuple[str, ...]] = {
            name: tuple(vals) for name, vals in (values or {}).items()
        }
        self.program = program

    @classmethod
    def from_argv(
        cls, table: OptionTable | Iterable[OptionSpec], argv: Sequence[str] | None = None
    ) -> Config:
        """
        Parse a raw process argument list, default ``sys.argv``.

        The first token is the program name; it is kept on
        ``Config.program`` and not parsed.
        """
        if argv is None:
            argv = sys.argv
        argv = list(argv)
        program = argv[0] if argv else None
        return cls(_ArgScanner(_as_table(table)).scan(argv[1:]), program=program)

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return str(self._values)

    __repr__ = _repr

    def option(self, name: str) -> tuple[str, ...] | None:
        return self._values.get(name)


class ScanState(enum.Enum):
    SCANNING = "scanning"
    FINAL = "final"


class _ArgScanner:
    """
    Walks one token list and collects values per option.

    Instance attributes:
      state : ScanState
        SCANNING until an option with a final policy is matched
      values : { string : [string] }
        values accumulated so far, keyed by long name
      active : OptionSpec | None
        the option plain values are currently assigned to; the
        unnamed spec (or None) when no valued option is open
      collected : [string]
        values received by the current occurrence of ``active``
      ignore_required : bool
        set once an option with a FinalizeIgnore policy is matched

    A scanner is used for a single parse and then thrown away.
    """

    def __init__(self, table: OptionTable) -> None:
        self.table = table
        self.state = ScanState.SCANNING
        self.values: dict[str, list[str]] = {}
        self.active: OptionSpec | None = table.unnamed
        self.collected: list[str] = []
        self.ignore_required = False

    def scan(self, args: Iterable[str]) -> dict[str, list[str]]:
        rargs = list(args)

        while rargs and self.state is ScanState.SCANNING:
            arg = rargs[0]
            if arg[0:2] == "--":
                # process a single long option (possibly with value(s))
                self._process_long_opt(rargs)
            elif arg[:1] == "-" and len(arg) > 1:
                # process a cluster of short options (possibly with
                # value(s) for the last one only)
                self._process_short_opts(rargs)
            else:
                self._process_value(rargs)

        self._close_occurrence()
        self._check_unnamed()
        self._check_required()
        return self.values

    def _process_long_opt(self, rargs: list[str]) -> None:
        arg = rargs.pop(0)
        spec = self.table.find_long(arg[2:])
        if spec is None or spec.is_unnamed:
            raise UnknownOptionError(arg)

        self._match(spec, rargs)

    def _process_short_opts(self, rargs: list[str]) -> None:
        arg = rargs.pop(0)
        i = 1
        for ch in arg[1:]:
            opt = "-" + ch
            spec = self.table.find_short(ch)
            i += 1  # we have consumed a character

            if spec is None:
                raise UnknownOptionError(opt)

            last = i == len(arg)
            if spec.policy.is_final and not last:
                # Any characters left in arg?  Pretend they're the
                # next arg and let the final option swallow them, once
                # each of them is known to name an option.
                for rest in arg[i:]:
                    if self.table.find_short(rest) is None:
                        raise UnknownOptionError("-" + rest)
                rargs.insert(0, arg[i:])
                self._match(spec, rargs)
                return

            # Only the last option of a cluster may take values.
            self._match(spec, rargs, takes_values=last)

    def _process_value(self, rargs: list[str]) -> None:
        arg = rargs.pop(0)
        if self.active is None:
            raise UnexpectedValueError(arg)

        self.values.setdefault(self.active.long, []).append(arg)
        if not self.active.is_unnamed:
            self.collected.append(arg)

    def _match(self, spec: OptionSpec, rargs: list[str], takes_values: bool = True) -> None:
        self._close_occurrence()
        self.values.setdefault(spec.long, [])

        if spec.policy.ignores_required:
            self.ignore_required = True

        if spec.policy.is_final:
            self._finalize(spec, rargs)
        elif takes_values and spec.policy.takes_values:
            self.active = spec
        else:
            logger.debug("Matched switch %s", spec)

    def _finalize(self, spec: OptionSpec, rargs: list[str]) -> None:
        self.state = ScanState.FINAL
        self.values[spec.long].extend(rargs)
        logger.debug("Collected remaining values %r for option %s", rargs[:], spec)
        del rargs[:]
        self.active = None

    def _close_occurrence(self) -> None:
        spec = self.active
        if spec is None or spec.is_unnamed:
            return

        count = len(self.collected)
        logger.debug("Collected values %r for option %s", self.collected, spec)
        if not spec.policy.accepts(count):
            raise PolicyViolationError(
                spec.long, spec.policy, count, spec.get_opt_string()
            )

        self.active = self.table.unnamed
        self.collected = []

    def _check_unnamed(self) -> None:
        spec = self.table.unnamed
        if spec is None or spec.long not in self.values:
            return

        count = len(self.values[spec.long])
        logger.debug(
            "Collected values %r for option %s", self.values[spec.long], spec
        )
        if not spec.policy.accepts(count):
            raise PolicyViolationError(
                spec.long, spec.policy, count, spec.get_opt_string()
            )

    def _check_required(self) -> None:
        if self.ignore_required:
            logger.debug("Skipping required option check")
            return

        for spec in self.table:
            if spec.required and spec.long not in self.values:
                raise MissingRequiredError(spec.long, spec.get_opt_string())


def _as_table(table: OptionTable | Iterable[OptionSpec]) -> OptionTable:
    if isinstance(table, OptionTable):
        return table
    return OptionTable(table)


def parse_args(
    table: OptionTable | Iterable[OptionSpec],
    args: Iterable[str],
    offset: int = 0,
) -> Config:
    """
    parse_args(table : OptionTable, args : [string], offset : int = 0)
    -> Config

    Parse 'args' against the specs in 'table'.  The first 'offset'
    tokens are skipped, so a raw ``sys.argv`` can be passed with
    ``offset=1``.  Any error raises a ParseError subclass; nothing is
    printed and the process is never exited.
    """
    if offset < 0:
        raise ValueError(f"offset must not be negative: {offset}")

    rargs = list(args)[offset:]
    return Config(_ArgScanner(_as_table(table)).scan(rargs))
