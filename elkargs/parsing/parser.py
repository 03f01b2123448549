# elkargs/parsing/parser.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence

from elkargs.domain.errors import MissingValueError, UnknownFlagError
from elkargs.domain.flags import Flag, FlagKind
from elkargs.domain.registry import FlagRegistry

logger = logging.getLogger(__name__)


class ParseStatus(IntEnum):
    OK = 0
    MISSING_VALUE = 1
    UNKNOWN_FLAG = 2


@dataclass
class ParseResult:
    status: ParseStatus = ParseStatus.OK

    # Flags in the order they matched (a flag may appear more than once)
    matched: List[Flag] = field(default_factory=list)

    # Dash tokens that matched nothing
    unknown: List[str] = field(default_factory=list)

    # String flag found as the last token
    missing_value: Optional[Flag] = None
    missing_value_token: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    def raise_for_status(self) -> None:
        if self.status is ParseStatus.MISSING_VALUE:
            raise MissingValueError(self.missing_value, self.missing_value_token)
        if self.status is ParseStatus.UNKNOWN_FLAG:
            raise UnknownFlagError(self.unknown)


def _lookup(registry: FlagRegistry, token: str) -> Optional[Flag]:
    """Find the flag a dash-prefixed token refers to.

    ``--name`` is a long lookup on ``name``. ``-x...`` is a short lookup on the
    single character after the dash; anything after it is ignored.
    """
    if token.startswith("--"):
        return registry.find_long(token[2:])
    return registry.find_short(token[1:2])


def parse_args(
    registry: FlagRegistry,
    argv: Sequence[str],
    *,
    strict: bool = False,
) -> ParseResult:
    """
    Scan ``argv`` once and write the values of matching flags in place.

    ``argv[0]`` (the program name) is always skipped. Tokens that do not start
    with a dash are ignored, as are dash tokens matching no flag. A string
    flag takes the following token verbatim, even if it starts with a dash.

    When a string flag is the last token, its value is left untouched, the
    scan stops and the status is ``MISSING_VALUE``.

    With ``strict=True``, unknown dash tokens turn an otherwise successful
    result into ``UNKNOWN_FLAG``. The scan itself is the same.

    Never raises for argument content; use ``ParseResult.raise_for_status``.
    """
    result = ParseResult()
    count = len(argv)
    index = 1

    while index < count:
        token = argv[index]
        index += 1

        if not token.startswith("-"):
            # Positional arguments are not handled.
            continue

        flag = _lookup(registry, token)
        if flag is None:
            logger.debug("Ignoring unknown flag %r.", token)
            result.unknown.append(token)
            continue

        if flag.kind is FlagKind.BOOL:
            flag.set_bool(True)
        elif flag.kind is FlagKind.STRING:
            if index >= count:
                logger.warning("Missing value for flag %r.", token)
                result.status = ParseStatus.MISSING_VALUE
                result.missing_value = flag
                result.missing_value_token = token
                break
            flag.set_string(argv[index])
            index += 1

        result.matched.append(flag)
        logger.debug("Matched %r -> %r", token, flag)

    if result.status is ParseStatus.OK and strict and result.unknown:
        result.status = ParseStatus.UNKNOWN_FLAG

    return result


def parse(
    registry: FlagRegistry,
    argv: Sequence[str],
    *,
    strict: bool = False,
) -> int:
    """Same as ``parse_args`` but only returns the status code (0 on success)."""
    return int(parse_args(registry, argv, strict=strict).status)
