"""
Docker Containers API
"""

import logging
from typing import List

from . import endpoints
from .exceptions import ContainerNotFound, DockerException, NetworkNotFound
from .models import ContainerDescriptor, CreateContainer, CreateContainerResult, parse_list, parse_object

logger = logging.getLogger(__name__)


class ContainerCollection:
    """Docker Containers collection"""
    
    def __init__(self, client):
        self.client = client
    
    def create(self, name: str, spec: CreateContainer) -> str:
        """
        Create container
        
        Args:
            name: Unique container name
            spec: PortBindingSpec or NetworkModeSpec
            
        Returns:
            Container ID assigned by the daemon
        """
        text = self.client.http.send(endpoints.create_container(name, spec))
        result = parse_object(text, CreateContainerResult.from_dict, 'create_container')
        logger.info(f"Container {name} created: {result.id}")
        return result.id
    
    def start(self, container_id: str):
        """Start container"""
        self.client.http.send(endpoints.start_container(container_id))
    
    def stop(self, container_id: str):
        """Stop container"""
        self.client.http.send(endpoints.stop_container(container_id))
    
    def delete(self, container_id: str):
        """Remove container"""
        self.client.http.send(endpoints.delete_container(container_id))
    
    def prune(self):
        """
        Remove all stopped containers
        
        Best effort: failures are logged and never raised.
        """
        try:
            self.client.http.send(endpoints.prune_containers())
        except DockerException as e:
            logger.warning(f"Container prune failed, ignoring: {e}")
    
    def find(self, container_id: str) -> List[ContainerDescriptor]:
        """
        List containers matching an ID or ID prefix
        
        Args:
            container_id: Container ID
            
        Returns:
            List of ContainerDescriptor objects
        """
        text = self.client.http.send(endpoints.find_containers(container_id))
        return parse_list(text, ContainerDescriptor.from_dict, 'find_containers')
    
    def get_ip(self, container_id: str) -> str:
        """
        Get the IP address of a container
        
        The first matching container is used, and of its networks whichever the
        daemon lists first. Containers attached to several networks get an
        arbitrary one of their addresses.
        
        Args:
            container_id: Container ID
            
        Returns:
            IP address string
            
        Raises:
            ContainerNotFound: If no container matches
            NetworkNotFound: If the container has no networks
        """
        found = self.find(container_id)
        if not found:
            raise ContainerNotFound(f"Container not found: {container_id}")
        
        container = found[0]
        for network in container.network_settings.networks.values():
            return network.ip_address
        raise NetworkNotFound(f"Container {container_id} is not attached to any network")
