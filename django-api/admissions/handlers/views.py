"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to handlers.errors
- Never contain business logic
- Never expose internal error details
"""

from django.http import JsonResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from admissions import container
from admissions.handlers.errors import error_response
from admissions.handlers.serializers import (
    CheckInRequestSerializer,
    CheckInSerializer,
    EventCreateRequestSerializer,
    EventSerializer,
    EventSummarySerializer,
    GiveawayCreateRequestSerializer,
    GiveawayFinalizeRequestSerializer,
    GiveawaySerializer,
    RotatingTokenSerializer,
)
from admissions.services.inputs import parse_external_event_id


def _missing_param(message: str) -> Response:
    return error_response("INVALID_INPUT", message, status.HTTP_400_BAD_REQUEST)


class EventListView(APIView):
    """Handler for POST /api/events and GET /api/events?organizer="""

    def post(self, request: Request) -> Response:
        payload = EventCreateRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        event = container.get_event_service().create_event(
            external_event_id=data["externalEventId"],
            title=data["title"],
            organizer=data["organizer"],
            description=data.get("description") or None,
            max_attendees=data.get("maxAttendees"),
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    def get(self, request: Request) -> Response:
        organizer = request.query_params.get("organizer")
        if not organizer:
            return _missing_param("organizer query param required")
        events = container.get_event_service().list_for_organizer(organizer)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{external_event_id}"""

    def get(self, request: Request, external_event_id: int) -> Response:
        summary = container.get_event_service().get_summary(external_event_id)
        return Response(EventSummarySerializer(summary).data)


class CheckInView(APIView):
    """Handler for POST /api/checkins and GET /api/checkins?eventId=|wallet="""

    def post(self, request: Request) -> Response:
        payload = CheckInRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        check_in = container.get_admission_controller().check_in(
            data["eventId"],
            data["walletAddress"],
            token=data.get("token") or None,
        )
        return Response(
            CheckInSerializer(check_in).data, status=status.HTTP_201_CREATED
        )

    def get(self, request: Request) -> Response:
        controller = container.get_admission_controller()

        wallet = request.query_params.get("wallet")
        if wallet:
            count = controller.get_check_in_count(wallet)
            return Response({"wallet": wallet, "count": count})

        event_id = request.query_params.get("eventId")
        if not event_id:
            return _missing_param("eventId or wallet query param required")
        attendees = controller.get_attendees(event_id)
        return Response(CheckInSerializer(attendees, many=True).data)


class QRTokenView(APIView):
    """Handler for GET /api/qr-token?eventId={external_event_id}"""

    def get(self, request: Request) -> Response:
        event_id = request.query_params.get("eventId")
        if not event_id:
            return _missing_param("eventId query param required")
        # tokens are keyed on the id embedded in the scannable code
        ext_id = parse_external_event_id(event_id)
        token = container.get_token_rotator().generate_token(str(ext_id))
        return Response(RotatingTokenSerializer(token).data)


class GiveawayView(APIView):
    """Handler for POST/PATCH /api/giveaways and GET /api/giveaways?eventId="""

    def post(self, request: Request) -> Response:
        payload = GiveawayCreateRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        giveaway, created = container.get_giveaway_coordinator().open_draw(
            data["eventId"], data["winnerCount"]
        )
        return Response(
            GiveawaySerializer(giveaway).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def patch(self, request: Request) -> Response:
        payload = GiveawayFinalizeRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        giveaway = container.get_giveaway_coordinator().finalize(
            data["giveawayId"],
            data["winners"],
            data["txHash"],
        )
        return Response(GiveawaySerializer(giveaway).data)

    def get(self, request: Request) -> Response:
        event_id = request.query_params.get("eventId")
        if not event_id:
            return _missing_param("eventId query param required")
        giveaway = container.get_giveaway_coordinator().get_result(event_id)
        if giveaway is None:
            # not drawn yet; DRF renders a None body as empty content
            return JsonResponse(None, safe=False)
        return Response(GiveawaySerializer(giveaway).data)
