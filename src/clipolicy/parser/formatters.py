from __future__ import annotations

import textwrap

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable

    from clipolicy.parser.errors import OptParseError
    from clipolicy.parser.optparser import OptionSpec
    from clipolicy.parser.optparser import OptionTable


class UsageFormatter:
    """
    Renders the option lines of a usage screen.

    Instance attributes:
      indent_increment : int
        the number of columns each option line is indented by
      max_help_position : int
        the maximum starting column for the help text
      help_position : int
        the calculated starting column for the help text
      width : int
        total number of columns for output
      help_width : int
        number of columns available for help text (calculated)
      short_first : bool
        list "-o" before "--output" when true
      option_strings : { OptionSpec : str }
        maps specs to the snippet naming them, eg. "-o, --output"
    """

    REQUIRED_TAG: str = "(required)"
    OPTIONAL_TAG: str = "(optional)"

    def __init__(
        self,
        indent_increment: int = 2,
        max_help_position: int = 24,
        width: int = 80,
        short_first: bool = True,
    ) -> None:
        self.indent_increment = indent_increment
        self.width = width
        _pos = min(max_help_position, max(width - 20, indent_increment * 2))
        self.help_position: int = _pos
        self.max_help_position: int = _pos
        self.current_indent: int = 0
        self.help_width: int = max(width - _pos, 11)
        self.short_first = short_first
        self.option_strings: dict[OptionSpec, str] = {}

    def format_option_strings(self, spec: OptionSpec) -> str:
        """Return a comma-separated list of option strings."""
        if spec.is_unnamed:
            return spec.long

        if self.short_first:
            opts = spec.short_opts + spec.long_opts
        else:
            opts = spec.long_opts + spec.short_opts

        return ", ".join(opts)

    def format_tag(self, spec: OptionSpec) -> str:
        return self.REQUIRED_TAG if spec.required else self.OPTIONAL_TAG

    def store_option_strings(self, specs: Iterable[OptionSpec]) -> None:
        self.option_strings = {}
        self.current_indent = self.indent_increment
        max_len = 0
        for spec in specs:
            strings = self.format_option_strings(spec)
            self.option_strings[spec] = strings
            max_len = max(max_len, len(strings) + self.current_indent)
        self.help_position = min(max_len + 2, self.max_help_position)
        self.help_width = max(self.width - self.help_position, 11)

    def format_option(self, spec: OptionSpec) -> str:
        # Option strings and help share a line when they fit:
        #   -o, --output  (required) Specifies output file
        #
        # Longer option strings push the help onto the next line,
        # indented to the column it would have started at.
        #   -x, --a-very-long-option-name
        #                 (optional) Does something
        result = []
        opts = self.option_strings[spec]
        opt_width = self.help_position - self.current_indent - 2
        if len(opts) > opt_width:
            opts = "%*s%s\n" % (self.current_indent, "", opts)
            indent_first = self.help_position
        else:  # start help on same line as opts
            opts = "%*s%-*s  " % (self.current_indent, "", opt_width, opts)
            indent_first = 0
        result.append(opts)

        help_text = " ".join(filter(None, (self.format_tag(spec), spec.description)))
        help_lines = textwrap.wrap(help_text, self.help_width)
        result.append("%*s%s\n" % (indent_first, "", help_lines[0]))
        result.extend(
            ["%*s%s\n" % (self.help_position, "", line) for line in help_lines[1:]]
        )
        return "".join(result)

    def format_usage(
        self,
        table: OptionTable,
        list_required: bool = True,
        list_unrequired: bool = True,
    ) -> str:
        specs = [
            spec
            for spec in table
            if (list_required if spec.required else list_unrequired)
        ]
        if not specs:
            return ""

        self.store_option_strings(specs)
        return "".join(self.format_option(spec) for spec in specs)

    def format_error(self, error: OptParseError, table: OptionTable) -> str:
        return f"error: {error}\n\nUsage:\n{self.format_usage(table)}"


def format_usage(
    table: OptionTable,
    list_required: bool = True,
    list_unrequired: bool = True,
) -> str:
    return UsageFormatter().format_usage(table, list_required, list_unrequired)


def format_error(error: OptParseError, table: OptionTable) -> str:
    return UsageFormatter().format_error(error, table)
