from django.urls import resolve
from django.urls import reverse


def test_event_routes():
    assert reverse("api:event-list-noslash") == "/api/events"
    assert reverse("api_v1:event-list") == "/api/v1/events/"
    assert (
        reverse("api:event-detail-noslash", kwargs={"event_id": "ab12cd34"})
        == "/api/events/ab12cd34"
    )
    assert resolve("/api/v1/events/ab12cd34/").view_name == "api_v1:event-detail"


def test_grid_routes():
    assert reverse("api:grid-noslash") == "/api/grid"
    assert resolve("/api/v1/grid/").view_name == "api_v1:grid"


def test_schema_docs_available_under_v1():
    assert resolve("/api/v1/schema/").view_name == "api-schema-v1"
    assert resolve("/api/v1/docs/").view_name == "api-docs-v1"
