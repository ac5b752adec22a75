"""
Docker Client - Main API entry point
"""

import logging
from typing import Optional

from . import endpoints
from .containers import ContainerCollection
from .http_client import DockerHTTPClient
from .images import ImageCollection
from .models import CreateContainer, NetworkModeSpec, PortBindingSpec, parse_object
from .settings import ClientSettings

logger = logging.getLogger(__name__)


class DockerClient:
    """
    Docker API Client
    
    Every call opens its own connection to the daemon socket; the client keeps
    no state between calls.
    """
    
    def __init__(self, settings: Optional[ClientSettings] = None,
                 http: Optional[DockerHTTPClient] = None):
        """
        Initialize Docker client
        
        Args:
            settings: Socket path, host and timeout (default: /var/run/docker.sock)
            http: Transport to use instead of one built from settings
        """
        self.http = http or DockerHTTPClient(settings)
        self.images = ImageCollection(self)
        self.containers = ContainerCollection(self)
    
    def ping(self) -> str:
        """Ping Docker daemon"""
        return self.http.send(endpoints.ping())
    
    def version(self) -> dict:
        """Get Docker version info"""
        return parse_object(self.http.send(endpoints.version()), lambda data: data, 'version')
    
    def _start_with_spec(self, name: str, spec: CreateContainer) -> str:
        if not self.images.find(spec.image):
            logger.info(f"Image {spec.image} not found locally, pulling")
            self.images.pull(spec.image)
        
        container_id = self.containers.create(name, spec)
        self.containers.start(container_id)
        logger.info(f"Container {name} started: {container_id}")
        return container_id
    
    def start_container_with_port_binding(self, name: str, image: str,
                                          container_port: int, host_port: int) -> str:
        """
        Pull image if absent, create container publishing one port and start it
        
        Args:
            name: Unique container name
            image: Full image name in the form image:version
            container_port: Container TCP port to publish
            host_port: Host port to publish it on
            
        Returns:
            Container ID
        """
        spec = PortBindingSpec.single(image, container_port, host_port)
        return self._start_with_spec(name, spec)
    
    def start_container_with_network_mode(self, name: str, image: str,
                                          network_mode: str) -> str:
        """
        Pull image if absent, create container with a network mode and start it
        
        Args:
            name: Unique container name
            image: Full image name in the form image:version
            network_mode: Network mode, e.g. host or bridge
            
        Returns:
            Container ID
        """
        spec = NetworkModeSpec(image=image, network_mode=network_mode)
        return self._start_with_spec(name, spec)
    
    def stop_and_cleanup_container(self, container_id: str, remove: bool = False):
        """
        Stop container and clean it up
        
        Args:
            container_id: Container ID
            remove: Delete this container instead of pruning all stopped ones
        """
        self.containers.stop(container_id)
        if remove:
            self.containers.delete(container_id)
        else:
            self.containers.prune()
        logger.info(f"Container {container_id} stopped and cleaned up")
