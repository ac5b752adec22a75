"""
Docker Helper - start and stop containers for integration tests
Talks to the Docker daemon via Unix socket using only the standard library
"""

from .api import (
    delete_container,
    find_containers,
    find_images,
    get_container_ip,
    prune_containers,
    pull_image,
    start_container,
    start_container_with_network_mode,
    start_container_with_port_binding,
    stop_and_cleanup_container,
    stop_container,
)
from .client import DockerClient
from .exceptions import (
    APIError,
    ContainerNotFound,
    DockerConnectionError,
    DockerException,
    NetworkNotFound,
    ResponseParseError,
)
from .models import (
    ContainerDescriptor,
    ContainerFilter,
    CreateContainer,
    CreateContainerResult,
    ImageDescriptor,
    ImageFilter,
    Network,
    NetworkModeSpec,
    NetworkSettings,
    PortBinding,
    PortBindingSpec,
)
from .settings import ClientSettings

__all__ = [
    'DockerClient',
    'ClientSettings',
    'DockerException',
    'DockerConnectionError',
    'APIError',
    'ResponseParseError',
    'ContainerNotFound',
    'NetworkNotFound',
    'ContainerDescriptor',
    'ContainerFilter',
    'CreateContainer',
    'CreateContainerResult',
    'ImageDescriptor',
    'ImageFilter',
    'Network',
    'NetworkModeSpec',
    'NetworkSettings',
    'PortBinding',
    'PortBindingSpec',
    'pull_image',
    'find_images',
    'start_container_with_port_binding',
    'start_container_with_network_mode',
    'start_container',
    'stop_container',
    'delete_container',
    'stop_and_cleanup_container',
    'prune_containers',
    'find_containers',
    'get_container_ip',
]

__version__ = '1.0.0'
