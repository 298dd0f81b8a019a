"""dockr: типизированный асинхронный клиент Docker Engine API."""

from dockr.client import DockerClient, create_docker_client
from dockr.docker_api.models import DoneResult, ErrorResponse
from dockr.settings.registry import ClientSettings

__all__ = [
    "ClientSettings",
    "DockerClient",
    "DoneResult",
    "ErrorResponse",
    "create_docker_client",
]

__version__ = "0.1.0"
