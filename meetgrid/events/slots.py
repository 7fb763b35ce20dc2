from __future__ import annotations

import math
import re
from typing import Any

# ASCII digits only; parseInt does not read other scripts' digits.
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def coerce_slot(value: Any) -> int | None:
    """Coerce one untrusted slot candidate to an int, or ``None`` to drop it.

    Mirrors ``parseInt(value, 10)`` as browsers send it: numbers are
    truncated toward zero, strings are read up to their first non-digit.
    """

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value.strip())
        if match is None:
            return None
        try:
            return int(match.group())
        except ValueError:
            # Longer than the interpreter's int conversion limit.
            return None
    return None


class SlotSet(frozenset):
    """One participant's complete current selection of slot indices."""

    __slots__ = ()

    @classmethod
    def from_candidates(cls, candidates: Any, *, total_slots: int) -> SlotSet:
        """Normalize an untrusted ``slots`` field.

        Invalid, duplicate and out-of-range entries are dropped silently; a
        field that is not a list at all counts as an empty selection.
        """

        if not isinstance(candidates, (list, tuple)):
            return cls()
        coerced = (coerce_slot(value) for value in candidates)
        return cls(
            slot for slot in coerced if slot is not None and 0 <= slot < total_slots
        )

    def ascending(self) -> list[int]:
        return sorted(self)

    def __repr__(self) -> str:
        return f"SlotSet({self.ascending()!r})"

