"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self
from uuid import UUID

_WALLET_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_TX_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
_DIGITS_RE = re.compile(r"^[0-9]+$")

# column limits: PositiveBigIntegerField and PositiveIntegerField
MAX_EXTERNAL_EVENT_ID = 2**63 - 1
MAX_COUNT = 2**31 - 1


@dataclass(frozen=True)
class EventId:
    """Internal storage identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class CheckInId:
    """Unique identifier for a CheckIn."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class GiveawayId:
    """Unique identifier for a Giveaway."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ExternalEventId:
    """On-chain event id, the identifier embedded in the scannable code."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("External event id must be an integer")
        if not 0 < self.value <= MAX_EXTERNAL_EVENT_ID:
            raise ValueError("External event id out of range")

    @classmethod
    def from_string(cls, value: str) -> Self:
        text = str(value).strip()
        if not _DIGITS_RE.match(text):
            raise ValueError("External event id must be decimal digits")
        return cls(value=int(text))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class WalletAddress:
    """EVM wallet address (0x followed by 40 hex characters)."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _WALLET_RE.match(self.value):
            raise ValueError("Invalid wallet address")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse and canonicalise to lowercase, the form used for identity."""
        return cls(value=str(value).strip().lower())

    @property
    def canonical(self) -> str:
        return self.value.lower()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TxHash:
    """Transaction hash proving an on-chain draw."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _TX_HASH_RE.match(self.value):
            raise ValueError("Invalid transaction hash")

    @property
    def canonical(self) -> str:
        return self.value.lower()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
        if self.value > MAX_COUNT:
            raise ValueError("Capacity too large")

    def admits(self, current_count: int) -> bool:
        return current_count < self.value


@dataclass(frozen=True)
class WinnerCount:
    """Number of winners a draw selects."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Winner count must be an integer")
        if not 1 <= self.value <= MAX_COUNT:
            raise ValueError("Winner count must be between 1 and 2**31 - 1")
