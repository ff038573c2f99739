"""Giveaway coordinator - pending -> finalized lifecycle of a draw.

The draw itself happens on-chain. This service opens a pending giveaway
(closing admissions in the same transaction), accepts the externally
computed winners with the transaction hash as proof, and keeps them
queryable.

Results are write-once: after executed_at is set only an identical replay
is accepted, so a late or duplicated confirmation cannot overwrite winners.
"""

from datetime import datetime

import structlog
from django.utils import timezone

from admissions.domain import EventId, Giveaway, GiveawayId
from admissions.domain.errors import (
    DuplicateGiveawayError,
    EventNotFoundError,
    GiveawayAlreadyFinalizedError,
    GiveawayNotFoundError,
)
from admissions.services.event_ledger import EventLedger
from admissions.services.inputs import (
    parse_event_id,
    parse_giveaway_id,
    parse_tx_hash,
    parse_winner_count,
    parse_winners,
)
from admissions.stores.interfaces import CheckInStore, GiveawayStore, UnitOfWork

logger = structlog.get_logger(__name__)


class GiveawayCoordinator:
    """Service for giveaway draws."""

    def __init__(
        self,
        ledger: EventLedger,
        giveaways: GiveawayStore,
        check_ins: CheckInStore,
        uow: UnitOfWork,
        now=timezone.now,
    ) -> None:
        self._ledger = ledger
        self._giveaways = giveaways
        self._check_ins = check_ins
        self._uow = uow
        self._now = now

    def create_pending(self, event_id: str | EventId, winner_count: int) -> Giveaway:
        """Open a draw and lock the event as one unit of work.

        Raises:
            InvalidInputError: If event_id or winner_count is malformed.
            EventNotFoundError: If the event does not exist.
            DuplicateGiveawayError: If the event already has a giveaway.
        """
        eid = parse_event_id(event_id)
        count = parse_winner_count(winner_count)

        with self._uow.atomic():
            state = self._ledger.get_admission_state(eid, for_update=True)
            if not state.exists:
                raise EventNotFoundError(str(eid))
            giveaway = self._giveaways.create_giveaway(eid, count.value)
            self._ledger.lock(eid)

        logger.info(
            "giveaway_opened",
            event_id=str(eid),
            giveaway_id=str(giveaway.id),
            winner_count=count.value,
            attendee_count=state.current_count,
        )
        return giveaway

    def open_draw(
        self, event_id: str | EventId, winner_count: int
    ) -> tuple[Giveaway, bool]:
        """Create-or-fetch variant of create_pending.

        Confirmation callbacks may fire more than once for the same event, so
        an existing giveaway with the same winner count is returned as-is.
        Returns the giveaway and whether it was created by this call.

        Raises:
            DuplicateGiveawayError: If a giveaway with another winner count exists.
        """
        try:
            return self.create_pending(event_id, winner_count), True
        except DuplicateGiveawayError:
            eid = parse_event_id(event_id)
            existing = self._giveaways.get_giveaway_for_event(eid)
            count = parse_winner_count(winner_count).value
            if existing is None or existing.winner_count != count:
                raise
            self._ledger.lock(eid)
            logger.info(
                "giveaway_reused", event_id=str(eid), giveaway_id=str(existing.id)
            )
            return existing, False

    def finalize(
        self, giveaway_id: str | GiveawayId, winners: list[str], tx_hash: str
    ) -> Giveaway:
        """Record the on-chain draw result.

        Raises:
            InvalidInputError: If an argument is malformed or has too many winners.
            GiveawayNotFoundError: If the giveaway does not exist.
            GiveawayAlreadyFinalizedError: If a different result was already recorded.
        """
        gid = parse_giveaway_id(giveaway_id)
        proof = parse_tx_hash(tx_hash)

        with self._uow.atomic():
            giveaway = self._giveaways.get_giveaway(gid, for_update=True)
            if giveaway is None:
                raise GiveawayNotFoundError(str(gid))
            result = parse_winners(winners, giveaway.winner_count)

            if giveaway.is_finalized:
                stored = [w.canonical for w in giveaway.winners]
                same_winners = stored == [w.canonical for w in result]
                if same_winners and giveaway.tx_hash.canonical == proof.canonical:
                    logger.info("giveaway_finalize_replayed", giveaway_id=str(gid))
                    return giveaway
                logger.warning(
                    "giveaway_refinalize_rejected",
                    giveaway_id=str(gid),
                    tx_hash=str(giveaway.tx_hash),
                    attempted_tx_hash=proof.value,
                )
                raise GiveawayAlreadyFinalizedError(str(gid))

            executed_at: datetime = self._now()
            finalized = self._giveaways.record_result(gid, result, proof, executed_at)

        self._reconcile(finalized)
        logger.info(
            "giveaway_finalized",
            giveaway_id=str(gid),
            event_id=str(finalized.event_id),
            tx_hash=proof.value,
            winners=[w.value for w in finalized.winners],
        )
        return finalized

    def get_result(self, event_id: str | EventId) -> Giveaway | None:
        """Return the event's giveaway, or None if no draw has been opened."""
        return self._giveaways.get_giveaway_for_event(parse_event_id(event_id))

    def _reconcile(self, giveaway: Giveaway) -> None:
        # on-chain registration is authoritative for the draw; only report drift
        check_ins = self._check_ins.list_for_event(giveaway.event_id)
        attendees = {c.wallet_address.canonical for c in check_ins}
        for winner in giveaway.winners:
            if winner.canonical not in attendees:
                logger.warning(
                    "giveaway_winner_not_checked_in",
                    giveaway_id=str(giveaway.id),
                    event_id=str(giveaway.event_id),
                    wallet=winner.canonical,
                )
