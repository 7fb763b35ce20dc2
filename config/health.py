from __future__ import annotations

from typing import Any

from django.http import JsonResponse

from meetgrid.events.services import get_event_store


def check_store() -> dict[str, Any]:
    try:
        store = get_event_store()
        events = len(store)
        total_slots = store.grid.total_slots
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True, "events": events, "totalSlots": total_slots}


def check_realtime() -> dict[str, Any]:
    try:
        from meetgrid.realtime.socketio import broadcaster  # noqa: PLC0415
        from meetgrid.realtime.socketio import get_protocol  # noqa: PLC0415

        sessions = len(get_protocol().registry)
        backlog = len(broadcaster)
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True, "sessions": sessions, "outbox": backlog}


def health(request):
    store = check_store()
    realtime = check_realtime()
    components = {"store": store, "realtime": realtime}

    all_ok = all(v.get("ok", False) for v in components.values())
    some_ok = any(v.get("ok", False) for v in components.values())

    status = "ok" if all_ok else ("degraded" if some_ok else "down")
    http_status = 200 if all_ok else 503

    return JsonResponse(
        {"status": status, "components": components},
        status=http_status,
    )
