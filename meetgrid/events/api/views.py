from __future__ import annotations

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from meetgrid.events.exceptions import EventNotFound
from meetgrid.events.services import get_event_store
from meetgrid.events.services import serialize_event
from meetgrid.events.sharing import resolve_base_url
from meetgrid.events.sharing import share_link

from .serializers import EventCreatedSerializer
from .serializers import EventCreateSerializer
from .serializers import EventDetailSerializer
from .serializers import GridSerializer

EVENT_NOT_FOUND_MESSAGE = "Event not found"


def _request_base_url(request) -> str:
    base_url = resolve_base_url(request.headers, secure=request.is_secure())
    if base_url:
        return base_url
    return f"{request.scheme}://{request.get_host()}"


class EventCollectionView(APIView):
    """Create a new availability event."""

    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Events"],
        request=EventCreateSerializer,
        responses={201: EventCreatedSerializer},
    )
    def post(self, request):
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = get_event_store().create(serializer.validated_data.get("title"))
        out = EventCreatedSerializer(
            {
                "id": event.id,
                "title": event.title,
                "link": share_link(_request_base_url(request), event.id),
            }
        ).data
        return Response(out, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Look up an event together with its current aggregate."""

    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Events"],
        responses={
            200: EventDetailSerializer,
            404: OpenApiResponse(description="Unknown event id."),
        },
    )
    def get(self, request, event_id: str):
        store = get_event_store()
        try:
            event = store.get(event_id)
        except EventNotFound:
            return Response(
                {"error": EVENT_NOT_FOUND_MESSAGE},
                status=status.HTTP_404_NOT_FOUND,
            )

        payload = serialize_event(
            event,
            total_slots=store.grid.total_slots,
            base_url=_request_base_url(request),
        )
        return Response(EventDetailSerializer(payload).data)


class GridView(APIView):
    """The weekly grid every client must render slot indices against."""

    permission_classes = [AllowAny]

    @extend_schema(tags=["Grid"], responses={200: GridSerializer})
    def get(self, request):
        grid = get_event_store().grid
        payload = {
            **grid.as_dict(),
            "submissionQuiescenceMs": int(settings.MEETGRID_SUBMISSION_QUIESCENCE_MS),
        }
        return Response(GridSerializer(payload).data)
