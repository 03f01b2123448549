# elkargs/domain/errors.py

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from elkargs.domain.flags import Flag


class ElkArgsError(Exception):
    """Base class for every error raised by elkargs."""


class FlagKindError(ElkArgsError, TypeError):
    """A flag value was read through the accessor of another kind."""


class FlagAlreadyRegisteredError(ElkArgsError, ValueError):
    """The same flag object was handed to a registry twice."""


class ParseError(ElkArgsError):
    """
    Outcome of a parse that did not fully succeed.

    Never raised by the parser itself; see ``ParseResult.raise_for_status``.
    """

    def __init__(self, message: str, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.token = token


class MissingValueError(ParseError):
    def __init__(self, flag: "Flag", token: str) -> None:
        super().__init__(f"Missing value for flag {token!r}.", token=token)
        self.flag = flag


class UnknownFlagError(ParseError):
    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens: List[str] = list(tokens)
        joined = ", ".join(repr(t) for t in self.tokens)
        super().__init__(
            f"Unknown flag(s): {joined}.",
            token=self.tokens[0] if self.tokens else None,
        )
