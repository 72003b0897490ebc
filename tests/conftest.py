import pytest

import khmercal
from khmercal.engines.calendar import KhmerCalendar


@pytest.fixture
def cal() -> KhmerCalendar:
    """A calendar with its own empty New Year cache."""
    return khmercal.make_calendar()
