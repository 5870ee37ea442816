from __future__ import annotations

from clipolicy.parser import *  # noqa: F403
from clipolicy.parser import __all__


__version__ = "0.1.0"
