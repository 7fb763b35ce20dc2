from django.urls import path

from .views import EventCollectionView
from .views import EventDetailView
from .views import GridView

# The browser client calls these without a trailing slash.
urlpatterns = [
    path("events/", EventCollectionView.as_view(), name="event-list"),
    path("events", EventCollectionView.as_view(), name="event-list-noslash"),
    path("events/<str:event_id>/", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>",
        EventDetailView.as_view(),
        name="event-detail-noslash",
    ),
    path("grid/", GridView.as_view(), name="grid"),
    path("grid", GridView.as_view(), name="grid-noslash"),
]
