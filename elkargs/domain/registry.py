# elkargs/domain/registry.py

from __future__ import annotations

import logging
import operator
from typing import Callable, Iterator, List, Optional

from elkargs.domain.errors import FlagAlreadyRegisteredError
from elkargs.domain.flags import Flag, FlagKind

logger = logging.getLogger(__name__)

NameEquals = Callable[[str, str], bool]


class FlagRegistry:
    """Ordered collection of the flags known to one parsing session.

    Flags are looked up most-recently-registered first, so when two flags
    share a name the one registered last shadows the other.

    The registry only references the flags; the caller keeps them and reads
    the parsed values from them.

    Parameters
    ----------
    name_equals:
        Comparison used for both long and short names, called as
        ``name_equals(candidate, registered_name)``. Defaults to exact
        equality.

    Notes
    -----
    Not thread-safe: callers must not register or parse concurrently on the
    same registry.
    """

    def __init__(self, name_equals: Optional[NameEquals] = None) -> None:
        self.name_equals: NameEquals = name_equals or operator.eq
        # Stored oldest first; lookups walk it in reverse.
        self._flags: List[Flag] = []

    def add_flag(
        self,
        flag: Flag,
        long_name: Optional[str] = None,
        short_name: Optional[str] = None,
        kind: FlagKind = FlagKind.BOOL,
    ) -> Flag:
        """
        Bind names and kind to ``flag`` and put it at the head of the registry.

        No name validation is done: a flag with neither name is accepted and
        simply never matches.
        """
        if flag.is_registered:
            raise FlagAlreadyRegisteredError(
                f"{flag.display_name} is already registered."
            )

        flag._bind(long_name, short_name, kind)
        self._flags.append(flag)
        logger.debug(
            "Registered %s flag (long=%r, short=%r).",
            flag.kind.value,
            long_name,
            short_name,
        )
        return flag

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #
    def find_long(self, name: str) -> Optional[Flag]:
        for flag in self:
            if flag.long_name is not None and self.name_equals(name, flag.long_name):
                return flag
        return None

    def find_short(self, char: str) -> Optional[Flag]:
        if not char:
            return None
        for flag in self:
            if flag.short_name is not None and self.name_equals(char, flag.short_name):
                return flag
        return None

    # ------------------------------------------------------------------ #
    # Container protocol
    # ------------------------------------------------------------------ #
    @property
    def first(self) -> Optional[Flag]:
        """Most recently registered flag, or None when empty."""
        return self._flags[-1] if self._flags else None

    def __iter__(self) -> Iterator[Flag]:
        return reversed(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, flag: object) -> bool:
        return any(f is flag for f in self._flags)


def add_flag(
    registry: FlagRegistry,
    flag: Flag,
    long_name: Optional[str] = None,
    short_name: Optional[str] = None,
    kind: FlagKind = FlagKind.BOOL,
) -> Flag:
    return registry.add_flag(flag, long_name, short_name, kind)
