"""Named day attributes; importing the package registers the standard set."""
from . import standard as _standard  # noqa: F401
