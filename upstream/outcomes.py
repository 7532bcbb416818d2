from dataclasses import dataclass
from typing import Literal, Optional, Union

MalformedReason = Literal[
    "empty",
    "unexpected_format",
    "unexpected_character",
    "no_opening_quote",
    "incomplete",
]


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Truncated:
    """finishReason MAX_TOKENS: the answer was cut off."""


@dataclass(frozen=True)
class SafetyBlocked:
    pass


@dataclass(frozen=True)
class RecitationBlocked:
    pass


@dataclass(frozen=True)
class ApiError:
    message: Optional[str] = None   # None when the error object had no message


@dataclass(frozen=True)
class Malformed:
    reason: MalformedReason
    snippet: Optional[str] = None   # body prefix, only for "unexpected_format"


@dataclass(frozen=True)
class EmptyContent:
    pass


UpstreamOutcome = Union[
    Success,
    Truncated,
    SafetyBlocked,
    RecitationBlocked,
    ApiError,
    Malformed,
    EmptyContent,
]
