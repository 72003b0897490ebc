"""
khmercal.engines.specs
----------------------
Default calendar parameters.
"""

from __future__ import annotations

from datetime import date

from ..core.types import LunarMonth
from .lunar_date import LunarWalkParams
from .new_year import NewYearParams

# ============================================================
# EPOCH
# ============================================================

# 1 January 1900 is lunar day 0 (1 waxing) of Boss.
EPOCH_DATE = date(1900, 1, 1)
EPOCH_MONTH = LunarMonth.BOSS

DEFAULT_WALK = LunarWalkParams(epoch=EPOCH_DATE, epoch_month=EPOCH_MONTH)


def default_params():
    from .calendar import KhmerCalendarParams
    return KhmerCalendarParams(walk=DEFAULT_WALK, new_year=NewYearParams())
