"""Conversion of raw service arguments into domain primitives.

ValueError from a value object becomes InvalidInputError naming the field.
"""

from typing import Any

from admissions.domain import (
    Capacity,
    EventId,
    ExternalEventId,
    GiveawayId,
    TxHash,
    WalletAddress,
    WinnerCount,
)
from admissions.domain.errors import InvalidInputError


def parse_event_id(value: Any) -> EventId:
    if isinstance(value, EventId):
        return value
    try:
        return EventId.from_string(value)
    except ValueError as exc:
        raise InvalidInputError("eventId", "must be a UUID") from exc


def parse_giveaway_id(value: Any) -> GiveawayId:
    if isinstance(value, GiveawayId):
        return value
    try:
        return GiveawayId.from_string(value)
    except ValueError as exc:
        raise InvalidInputError("giveawayId", "must be a UUID") from exc


def parse_external_event_id(value: Any) -> ExternalEventId:
    if isinstance(value, ExternalEventId):
        return value
    try:
        if isinstance(value, int):
            return ExternalEventId(value)
        return ExternalEventId.from_string(value)
    except ValueError as exc:
        raise InvalidInputError(
            "externalEventId", "must be a positive 64-bit integer"
        ) from exc


def parse_wallet(value: Any, field: str = "walletAddress") -> WalletAddress:
    """Parse a wallet into its canonical lowercase form."""
    if isinstance(value, WalletAddress):
        return WalletAddress(value.canonical)
    try:
        return WalletAddress.from_string(value)
    except ValueError as exc:
        raise InvalidInputError(
            field, "must be a 0x-prefixed 40 character hex address"
        ) from exc


def parse_winners(values: Any, winner_count: int) -> tuple[WalletAddress, ...]:
    """Validate a draw result, keeping the addresses as reported."""
    if not isinstance(values, (list, tuple)) or not values:
        raise InvalidInputError("winners", "must be a non-empty list")
    try:
        winners = tuple(
            w if isinstance(w, WalletAddress) else WalletAddress(str(w).strip())
            for w in values
        )
    except ValueError as exc:
        raise InvalidInputError("winners", "must contain wallet addresses") from exc
    if len({w.canonical for w in winners}) != len(winners):
        raise InvalidInputError("winners", "must not contain duplicates")
    if len(winners) > winner_count:
        raise InvalidInputError("winners", f"at most {winner_count} winners allowed")
    return winners


def parse_tx_hash(value: Any) -> TxHash:
    if isinstance(value, TxHash):
        return value
    try:
        return TxHash(str(value).strip())
    except ValueError as exc:
        raise InvalidInputError(
            "txHash", "must be a 0x-prefixed 64 character hex hash"
        ) from exc


def parse_winner_count(value: Any) -> WinnerCount:
    try:
        return WinnerCount(value)
    except ValueError as exc:
        raise InvalidInputError("winnerCount", "must be a positive integer") from exc


def parse_capacity(value: Any) -> Capacity | None:
    if value is None:
        return None
    try:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("Capacity must be an integer")
        return Capacity(value)
    except ValueError as exc:
        raise InvalidInputError(
            "maxAttendees", "must be a non-negative integer"
        ) from exc
