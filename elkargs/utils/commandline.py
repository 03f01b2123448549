# elkargs/utils/commandline.py

import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

from elkargs.domain.flags import Flag, FlagKind
from elkargs.domain.registry import FlagRegistry
from elkargs.parsing.parser import ParseResult, parse_args as scan_args


@dataclass
class CommandLine:
    """Flags of the elkargs demo program, and the outcome of parsing them."""

    registry: FlagRegistry = field(default_factory=FlagRegistry)
    verbose: Flag = field(default_factory=Flag)
    message: Flag = field(default_factory=Flag)
    debug: Flag = field(default_factory=Flag)
    result: Optional[ParseResult] = None


def build_command_line() -> CommandLine:
    """
    Register the demo flags:
      --verbose / -v : boolean
      -m MESSAGE     : string (no long form)
      --debug        : enable debug mode (more verbose logs)
    """
    cli = CommandLine()
    cli.registry.add_flag(cli.verbose, "verbose", "v", FlagKind.BOOL)
    cli.registry.add_flag(cli.message, None, "m", FlagKind.STRING)
    cli.registry.add_flag(cli.debug, "debug", None, FlagKind.BOOL)
    return cli


def parse_args(argv: Optional[Sequence[str]] = None, strict: bool = False) -> CommandLine:
    """
    Parse command-line arguments (``sys.argv`` when argv is None).

    argv includes the program name at position 0.
    """
    if argv is None:
        argv = sys.argv

    cli = build_command_line()
    cli.result = scan_args(cli.registry, argv, strict=strict)
    return cli
