"""Health-check payload."""

from interest_calculator import __version__
from interest_calculator.schemas.ping import PingResponse


def get_ping_response() -> PingResponse:
    return PingResponse(message="pong", version=__version__)
