from .health import health
from .token import token
from .recording import recording_start, recording_layout, recording_stop, recording_status

__all__ = [
    "health",
    "token",
    "recording_start",
    "recording_layout",
    "recording_stop",
    "recording_status",
]
