from __future__ import annotations

import logging
import sys

from collections.abc import Sequence

from clipolicy.parser.errors import ParseError
from clipolicy.parser.formatters import UsageFormatter
from clipolicy.parser.optparser import UNNAMED
from clipolicy.parser.optparser import Config
from clipolicy.parser.optparser import OptionSpec
from clipolicy.parser.optparser import OptionTable
from clipolicy.parser.policies import AtLeast
from clipolicy.parser.policies import Exact
from clipolicy.parser.policies import FinalizeIgnore


SPECS = OptionTable(
    [
        OptionSpec(None, UNNAMED, "Input files", True, AtLeast(1)),
        OptionSpec("o", "output", "File the result is written to", True, Exact(1)),
        OptionSpec("v", "verbose", "Shows verbose output", False, Exact(0)),
        OptionSpec("h", "help", "Display a help screen", False, FinalizeIgnore()),
    ]
)


def main(argv: Sequence[str] | None = None) -> int:
    formatter = UsageFormatter()

    try:
        config = Config.from_argv(SPECS, argv)
    except ParseError as err:
        print(formatter.format_error(err, SPECS), file=sys.stderr, end="")
        return 1

    if config.option("help") is not None:
        print(f"Usage: {config.program} [OPTIONS] FILE...")
        print(formatter.format_usage(SPECS), end="")
        return 0

    # Either --verbose or -v
    if "verbose" in config:
        logging.basicConfig(level=logging.DEBUG)

    # Always present, parsing fails if a required option is missing.
    files = config[UNNAMED]
    output = config["output"][0]

    logging.getLogger(__name__).debug("Reading files %r", files)
    print(f"Writing {len(files)} file(s) to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
