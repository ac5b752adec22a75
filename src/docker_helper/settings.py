"""
Connection settings for the Docker daemon
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_SOCKET_PATH = '/var/run/docker.sock'
DEFAULT_HOST = 'localhost'


@dataclass(frozen=True)
class ClientSettings:
    """
    Where and how to reach the daemon
    
    Args:
        socket_path: Path to the daemon Unix socket
        host: Host name used in the request URL and Host header
        timeout: Socket timeout in seconds (None blocks until the daemon answers)
    """
    
    socket_path: str = DEFAULT_SOCKET_PATH
    host: str = DEFAULT_HOST
    timeout: Optional[float] = None
    
    def __post_init__(self):
        # Tolerate docker-style URLs
        if self.socket_path.startswith('unix://'):
            object.__setattr__(self, 'socket_path', self.socket_path[len('unix://'):])
