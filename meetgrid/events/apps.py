from django.apps import AppConfig
from django.conf import settings
from django.utils.translation import gettext_lazy as _


class EventsConfig(AppConfig):
    name = "meetgrid.events"
    verbose_name = _("Events")

    def ready(self):
        from meetgrid.events.grid import get_slot_grid  # noqa: PLC0415
        from meetgrid.events.store import EventStore  # noqa: PLC0415

        self.grid = get_slot_grid()
        self.store = EventStore(
            self.grid,
            default_title=settings.MEETGRID_DEFAULT_EVENT_TITLE,
        )
