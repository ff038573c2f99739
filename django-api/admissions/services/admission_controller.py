"""Admission controller - validates and durably records check-ins.

Per (event, wallet) the only transition is unregistered -> checked_in.
Checks run in a fixed order so each rejection tells the attendee what to
do next: the event is missing, closed, the code needs a rescan, the room is
full, or they are already in.

Lock, token and capacity checks run inside one transaction holding the
event row lock, so the count read and the insert cannot interleave with
another check-in or with a giveaway locking the event. The unique
(event, wallet) constraint stays the authoritative duplicate guard.
"""

import structlog

from admissions.domain import CheckIn, EventId, WalletAddress
from admissions.domain.errors import (
    DomainError,
    EventAtCapacityError,
    EventLockedError,
    EventNotFoundError,
    TokenExpiredError,
    TokenRequiredError,
)
from admissions.services.event_ledger import EventLedger
from admissions.services.inputs import parse_event_id, parse_wallet
from admissions.services.token_rotator import TokenRotator
from admissions.stores.interfaces import CheckInStore, UnitOfWork

logger = structlog.get_logger(__name__)


class AdmissionController:
    """Service for check-in admission."""

    def __init__(
        self,
        ledger: EventLedger,
        check_ins: CheckInStore,
        tokens: TokenRotator,
        uow: UnitOfWork,
        require_token: bool = False,
    ) -> None:
        self._ledger = ledger
        self._check_ins = check_ins
        self._tokens = tokens
        self._uow = uow
        self._require_token = require_token

    def check_in(
        self,
        event_id: str | EventId,
        wallet_address: str | WalletAddress,
        token: str | None = None,
    ) -> CheckIn:
        """Admit a wallet to an event.

        Raises:
            InvalidInputError: If event_id or wallet_address is malformed.
            EventNotFoundError: If the event does not exist.
            EventLockedError: If the event no longer accepts check-ins.
            TokenExpiredError: If a supplied token is not valid right now.
            TokenRequiredError: If no token was supplied and tokens are mandatory.
            EventAtCapacityError: If max_attendees has been reached.
            AlreadyCheckedInError: If the wallet is already checked in.
        """
        eid = parse_event_id(event_id)
        wallet = parse_wallet(wallet_address)
        log = logger.bind(event_id=str(eid), wallet=wallet.canonical)

        try:
            with self._uow.atomic():
                state = self._ledger.get_admission_state(eid, for_update=True)
                if not state.exists:
                    raise EventNotFoundError(str(eid))
                if state.is_locked:
                    raise EventLockedError(str(eid))

                if token is None:
                    if self._require_token:
                        raise TokenRequiredError()
                    log.info("check_in_without_token")
                elif not self._tokens.validate_token(
                    str(state.external_event_id), token
                ):
                    raise TokenExpiredError()

                if state.is_full:
                    raise EventAtCapacityError(str(eid))

                check_in = self._check_ins.add_check_in(eid, wallet)
        except DomainError as exc:
            log.info("check_in_rejected", code=exc.code.value)
            raise

        log.info("check_in_recorded", check_in_id=str(check_in.id))
        return check_in

    def get_attendees(self, event_id: str | EventId) -> list[CheckIn]:
        """Return attendees in check-in order.

        Raises:
            InvalidInputError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        eid = parse_event_id(event_id)
        if not self._ledger.get_admission_state(eid).exists:
            raise EventNotFoundError(str(eid))
        return self._check_ins.list_for_event(eid)

    def get_check_in_count(self, wallet_address: str | WalletAddress) -> int:
        """Return how many events a wallet has checked in to."""
        wallet = parse_wallet(wallet_address, field="wallet")
        return self._check_ins.count_for_wallet(wallet)
