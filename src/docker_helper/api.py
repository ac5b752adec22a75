"""
Module level helpers talking to the local Docker daemon

Each function builds a DockerClient with default settings, so no state is
shared between calls. Use DockerClient directly to point at another socket.
"""

from typing import List

from .client import DockerClient
from .models import ContainerDescriptor, ImageDescriptor


def pull_image(image_name: str):
    DockerClient().images.pull(image_name)


def find_images(reference: str) -> List[ImageDescriptor]:
    return DockerClient().images.find(reference)


def start_container_with_port_binding(container_name: str, image: str,
                                      container_port: int, host_port: int) -> str:
    return DockerClient().start_container_with_port_binding(
        container_name, image, container_port, host_port
    )


def start_container_with_network_mode(container_name: str, image: str,
                                      network_mode: str) -> str:
    return DockerClient().start_container_with_network_mode(container_name, image, network_mode)


def start_container(container_id: str):
    DockerClient().containers.start(container_id)


def stop_container(container_id: str):
    DockerClient().containers.stop(container_id)


def delete_container(container_id: str):
    DockerClient().containers.delete(container_id)


def stop_and_cleanup_container(container_id: str, remove: bool = False):
    DockerClient().stop_and_cleanup_container(container_id, remove=remove)


def prune_containers():
    DockerClient().containers.prune()


def find_containers(container_id: str) -> List[ContainerDescriptor]:
    return DockerClient().containers.find(container_id)


def get_container_ip(container_id: str) -> str:
    return DockerClient().containers.get_ip(container_id)
