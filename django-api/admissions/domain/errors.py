"""Domain error codes for the admissions module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    GIVEAWAY_NOT_FOUND = "GIVEAWAY_NOT_FOUND"
    ALREADY_CHECKED_IN = "ALREADY_CHECKED_IN"
    DUPLICATE_EVENT = "DUPLICATE_EVENT"
    DUPLICATE_GIVEAWAY = "DUPLICATE_GIVEAWAY"
    GIVEAWAY_ALREADY_FINALIZED = "GIVEAWAY_ALREADY_FINALIZED"
    EVENT_LOCKED = "EVENT_LOCKED"
    EVENT_AT_CAPACITY = "EVENT_AT_CAPACITY"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_REQUIRED = "TOKEN_REQUIRED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when an identifier or payload value is malformed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=f"Invalid {field}: {reason}",
        )
        self.field = field


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class GiveawayNotFoundError(DomainError):
    """Raised when a giveaway is not found."""

    def __init__(self, giveaway_id: str) -> None:
        super().__init__(
            code=ErrorCode.GIVEAWAY_NOT_FOUND,
            message="Giveaway not found",
        )
        self.giveaway_id = giveaway_id


class AlreadyCheckedInError(DomainError):
    """Raised when the wallet already holds a check-in for the event."""

    def __init__(self, event_id: str, wallet: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_CHECKED_IN,
            message="Already checked in to this event",
        )
        self.event_id = event_id
        self.wallet = wallet


class DuplicateEventError(DomainError):
    """Raised when an external event id is registered twice."""

    def __init__(self, external_event_id: int) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_EVENT,
            message="Event with this external id already exists",
        )
        self.external_event_id = external_event_id


class DuplicateGiveawayError(DomainError):
    """Raised when a giveaway already exists for the event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_GIVEAWAY,
            message="Giveaway already exists for this event",
        )
        self.event_id = event_id


class GiveawayAlreadyFinalizedError(DomainError):
    """Raised when a finalized giveaway receives a different result."""

    def __init__(self, giveaway_id: str) -> None:
        super().__init__(
            code=ErrorCode.GIVEAWAY_ALREADY_FINALIZED,
            message="Giveaway results have already been recorded",
        )
        self.giveaway_id = giveaway_id


class EventLockedError(DomainError):
    """Raised when check-in is attempted on a locked event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_LOCKED,
            message="Event is locked, giveaway already started",
        )
        self.event_id = event_id


class EventAtCapacityError(DomainError):
    """Raised when the event has reached max attendees."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_AT_CAPACITY,
            message="Event is at full capacity",
        )
        self.event_id = event_id


class TokenExpiredError(DomainError):
    """Raised when a check-in token is stale, forged or for another event."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOKEN_EXPIRED,
            message="Check-in code expired, please scan again",
        )


class TokenRequiredError(DomainError):
    """Raised when check-in without a token is disabled."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOKEN_REQUIRED,
            message="Scan the event code to check in",
        )
