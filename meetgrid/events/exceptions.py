class EventNotFound(LookupError):
    """Raised when an event id is unknown to this process."""

    def __init__(self, event_id: object) -> None:
        self.event_id = event_id
        super().__init__(f"Event {event_id!r} does not exist")
