"""
Numlens command line

    $ numlens 0xdeadbeef
    $ numlens -i ieee754 -i bytes 5mib
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as metadata_version
from typing import Sequence

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .config import DisplayConf, load_conf
from .display import print_groups
from .errors import ParseError
from .interpret import Interpretation, generate
from .logging_config import setup_logging
from .parse import parse

logger = logging.getLogger(__name__)

DESCRIPTION = "Decimal, hex, octal, bin number + byte converter."

EPILOG = """\
Input values can be binary, octal, decimal or hexadecimal:
  $ numlens 42
  $ numlens 0b10001111
  $ numlens 0o777
  $ numlens 0xdeadbeef
Input values can be negative:
  $ numlens -- -0xff
Input values can have underscores for better readability:
  $ numlens 1_000_000
  $ numlens 0xde_ad_be_ef
Input values can have a unit:
  $ numlens 1mib
  Valid units are: k/kb, m/mb, g/gb, t/tb
                   ki/kib, mi/mib, gi/gib, ti/tib
"""


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numlens",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("value", help="integer input, e.g. 42, -0xff, 0b1010, 0o17, 5mib")
    parser.add_argument(
        "-i", "--interpretation",
        action="append",
        choices=[i.value for i in Interpretation],
        help="show only this interpretation, may be repeated (default: all)",
    )
    parser.add_argument("-c", "--config", help="TOML file with a [numlens] table of display settings")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more, may be repeated")
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line and return the process exit status.

    0 on success, 1 on illegal input, 2 on usage errors or an unreadable config file.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(_verbosity_level(args.verbose))

    try:
        conf = load_conf(args.config) if args.config else DisplayConf()
    except (OSError, toml.TomlDecodeError, TypeError, ValueError) as exc:
        parser.error(f"cannot load config {args.config}: {exc}")

    try:
        parsed = parse(args.value)
    except ParseError as exc:
        logger.debug("Rejected input %r", args.value, exc_info=True)
        print(f"Illegal input: {exc}", file=sys.stderr)
        return 1

    groups = generate(parsed, conf, interpretations=args.interpretation)
    print_groups(groups, conf)
    return 0


def package_version() -> str:
    try:
        return metadata_version("numlens")
    except PackageNotFoundError:
        return "unknown"


def _verbosity_level(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING
