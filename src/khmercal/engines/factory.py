from __future__ import annotations

from typing import Optional

from .calendar import KhmerCalendar, KhmerCalendarParams
from .specs import default_params


def make_calendar(params: Optional[KhmerCalendarParams] = None) -> KhmerCalendar:
    return KhmerCalendar(params if params is not None else default_params())
