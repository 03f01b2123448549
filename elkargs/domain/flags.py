# elkargs/domain/flags.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from elkargs.domain.errors import FlagKindError


class FlagKind(str, Enum):
    BOOL = "bool"
    STRING = "string"


@dataclass(frozen=True)
class BoolValue:
    value: bool = False


@dataclass(frozen=True)
class StringValue:
    value: Optional[str] = None


FlagValue = Union[BoolValue, StringValue]


def default_value(kind: FlagKind) -> FlagValue:
    """Value a flag holds right after registration."""
    if kind is FlagKind.BOOL:
        return BoolValue()
    if kind is FlagKind.STRING:
        return StringValue()
    raise ValueError(f"Unknown flag kind: {kind!r}")


class Flag:
    """
    One registrable command-line flag.

    A flag is created empty by the caller and filled in by
    ``FlagRegistry.add_flag``. After the parse, the caller reads the result
    back from the same object:

        verbose = Flag()
        registry.add_flag(verbose, "verbose", "v", FlagKind.BOOL)
        parse(registry, sys.argv)
        if verbose.as_bool: ...

    The kind is fixed once the flag is registered. The value is a tagged
    variant (``BoolValue`` or ``StringValue``); the typed accessors refuse to
    read the wrong variant.
    """

    def __init__(self) -> None:
        self.long_name: Optional[str] = None
        self.short_name: Optional[str] = None
        self._kind: Optional[FlagKind] = None
        self.value: Optional[FlagValue] = None

    @property
    def kind(self) -> Optional[FlagKind]:
        return self._kind

    @property
    def is_registered(self) -> bool:
        return self._kind is not None

    def _bind(
        self,
        long_name: Optional[str],
        short_name: Optional[str],
        kind: FlagKind,
    ) -> None:
        self.long_name = long_name
        self.short_name = short_name
        self._kind = FlagKind(kind)
        self.value = default_value(self._kind)

    # ------------------------------------------------------------------ #
    # Typed access
    # ------------------------------------------------------------------ #
    @property
    def as_bool(self) -> bool:
        if not isinstance(self.value, BoolValue):
            raise FlagKindError(f"{self.display_name} is not a boolean flag.")
        return self.value.value

    @property
    def as_string(self) -> Optional[str]:
        if not isinstance(self.value, StringValue):
            raise FlagKindError(f"{self.display_name} is not a string flag.")
        return self.value.value

    def set_bool(self, value: bool = True) -> None:
        if self._kind is not FlagKind.BOOL:
            raise FlagKindError(f"{self.display_name} is not a boolean flag.")
        self.value = BoolValue(bool(value))

    def set_string(self, value: str) -> None:
        if self._kind is not FlagKind.STRING:
            raise FlagKindError(f"{self.display_name} is not a string flag.")
        self.value = StringValue(value)

    # ------------------------------------------------------------------ #
    # Display
    # ------------------------------------------------------------------ #
    @property
    def display_name(self) -> str:
        """``--long`` when available, else ``-s``, else ``<unnamed flag>``."""
        if self.long_name is not None:
            return f"--{self.long_name}"
        if self.short_name is not None:
            return f"-{self.short_name}"
        return "<unnamed flag>"

    def __repr__(self) -> str:
        kind = self._kind.value if self._kind else None
        return (
            f"Flag(long_name={self.long_name!r}, short_name={self.short_name!r}, "
            f"kind={kind!r}, value={self.value!r})"
        )
