"""Default calendar bootstrap (import side-effect)."""
from . import attributes as _attributes  # noqa: F401
from .api import set_calendar
from .engines.factory import make_calendar

set_calendar(make_calendar())
