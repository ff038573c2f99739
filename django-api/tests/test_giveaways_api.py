"""Integration tests for the giveaway endpoints.

Run with: pytest tests/test_giveaways_api.py -v
"""

import uuid

import pytest

from admissions import models
from tests.conftest import ORGANIZER, tx_hash, wallet


@pytest.fixture
def event(db):
    return models.Event.objects.create(
        external_event_id=1, title="Meetup", organizer=ORGANIZER
    )


def open_draw(client, event, winner_count=1):
    payload = {"eventId": str(event.id), "winnerCount": winner_count}
    return client.post("/api/giveaways", payload, format="json")


def finalize(client, giveaway_id, winners, proof):
    return client.patch(
        "/api/giveaways",
        {"giveawayId": giveaway_id, "winners": winners, "txHash": proof},
        format="json",
    )


@pytest.mark.django_db
class TestGiveawayCreate:
    """Tests for POST /api/giveaways"""

    def test_creates_pending_giveaway_and_locks_event(self, api_client, event):
        response = open_draw(api_client, event, winner_count=2)

        assert response.status_code == 201
        body = response.json()
        assert body["event_id"] == str(event.id)
        assert body["winner_count"] == 2
        assert body["winners"] == []
        assert body["tx_hash"] is None
        assert body["executed_at"] is None
        assert body["status"] == "pending"
        event.refresh_from_db()
        assert event.is_locked

    def test_repeat_create_returns_existing(self, api_client, event):
        first = open_draw(api_client, event)
        second = open_draw(api_client, event)

        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert models.Giveaway.objects.count() == 1

    def test_conflicting_winner_count_returns_409(self, api_client, event):
        open_draw(api_client, event, winner_count=1)
        response = open_draw(api_client, event, winner_count=5)
        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_GIVEAWAY"

    def test_unknown_event_returns_404(self, api_client):
        response = api_client.post(
            "/api/giveaways",
            {"eventId": str(uuid.uuid4()), "winnerCount": 1},
            format="json",
        )
        assert response.status_code == 404

    def test_zero_winners_returns_400(self, api_client, event):
        assert open_draw(api_client, event, winner_count=0).status_code == 400
        event.refresh_from_db()
        assert not event.is_locked

    def test_oversized_winner_count_returns_400(self, api_client, event):
        response = open_draw(api_client, event, winner_count=2**31)
        assert response.status_code == 400
        assert not models.Giveaway.objects.exists()


@pytest.mark.django_db
class TestGiveawayFinalize:
    """Tests for PATCH /api/giveaways"""

    def test_finalize_records_winners(self, api_client, event):
        giveaway_id = open_draw(api_client, event).json()["id"]
        response = finalize(api_client, giveaway_id, [wallet(1)], tx_hash(1))

        assert response.status_code == 200
        body = response.json()
        assert body["winners"] == [wallet(1)]
        assert body["tx_hash"] == tx_hash(1)
        assert body["executed_at"] is not None
        assert body["status"] == "finalized"

    def test_identical_replay_returns_200(self, api_client, event):
        giveaway_id = open_draw(api_client, event).json()["id"]
        first = finalize(api_client, giveaway_id, [wallet(1)], tx_hash(1))
        second = finalize(api_client, giveaway_id, [wallet(1)], tx_hash(1))

        assert second.status_code == 200
        assert second.json()["executed_at"] == first.json()["executed_at"]

    def test_replay_with_uppercase_tx_hash_returns_200(self, api_client, event):
        giveaway_id = open_draw(api_client, event).json()["id"]
        finalize(api_client, giveaway_id, [wallet(1)], "0x" + "ab" * 32)
        response = finalize(api_client, giveaway_id, [wallet(1)], "0x" + "AB" * 32)

        assert response.status_code == 200
        assert response.json()["tx_hash"] == "0x" + "ab" * 32

    def test_different_result_returns_409(self, api_client, event):
        giveaway_id = open_draw(api_client, event).json()["id"]
        finalize(api_client, giveaway_id, [wallet(1)], tx_hash(1))
        response = finalize(api_client, giveaway_id, [wallet(2)], tx_hash(2))

        assert response.status_code == 409
        assert response.json()["code"] == "GIVEAWAY_ALREADY_FINALIZED"
        assert models.Giveaway.objects.get().winners == [wallet(1)]

    def test_unknown_giveaway_returns_404(self, api_client):
        response = finalize(api_client, str(uuid.uuid4()), [wallet(1)], tx_hash(1))
        assert response.status_code == 404
        assert response.json()["code"] == "GIVEAWAY_NOT_FOUND"

    def test_missing_fields_returns_400(self, api_client):
        payload = {"giveawayId": str(uuid.uuid4())}
        response = api_client.patch("/api/giveaways", payload, format="json")
        assert response.status_code == 400

    def test_malformed_tx_hash_returns_400(self, api_client, event):
        giveaway_id = open_draw(api_client, event).json()["id"]
        response = finalize(api_client, giveaway_id, [wallet(1)], "0xTX")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INPUT"


@pytest.mark.django_db
class TestGiveawayQuery:
    """Tests for GET /api/giveaways"""

    def test_null_before_draw(self, api_client, event):
        response = api_client.get("/api/giveaways", {"eventId": str(event.id)})
        assert response.status_code == 200
        assert response.json() is None

    def test_pending_after_create(self, api_client, event):
        open_draw(api_client, event)
        body = api_client.get("/api/giveaways", {"eventId": str(event.id)}).json()
        assert body["status"] == "pending"
        assert body["winners"] == []

    def test_requires_event_id(self, api_client):
        assert api_client.get("/api/giveaways").status_code == 400
