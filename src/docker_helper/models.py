"""
Docker API payloads

Request and response bodies exchanged with the daemon. Field names on the wire
follow the daemon's capitalization and are mapped explicitly in to_dict/from_dict.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, TypeVar

from .exceptions import ResponseParseError

T = TypeVar('T')


def _expect_dict(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _expect_str(data: Dict[str, Any], key: str, what: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{what}.{key} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class ImageFilter:
    """Narrows an image listing to one repository:tag reference"""

    reference: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'reference': list(self.reference)}


@dataclass(frozen=True)
class ContainerFilter:
    """Narrows a container listing to one id (or id prefix)"""

    id: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': list(self.id)}


@dataclass(frozen=True)
class ImageDescriptor:
    """Docker Image identity"""

    id: str

    @classmethod
    def from_dict(cls, data: Any) -> 'ImageDescriptor':
        data = _expect_dict(data, 'Image')
        return cls(id=_expect_str(data, 'Id', 'Image'))


@dataclass(frozen=True)
class Network:
    """Container attachment to one network"""

    ip_address: str

    @classmethod
    def from_dict(cls, data: Any) -> 'Network':
        data = _expect_dict(data, 'Network')
        return cls(ip_address=_expect_str(data, 'IPAddress', 'Network'))


@dataclass(frozen=True)
class NetworkSettings:
    """
    Networks a container is attached to, keyed by network name

    The daemon gives no meaningful order to this mapping.
    """

    networks: Dict[str, Network] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> 'NetworkSettings':
        data = _expect_dict(data, 'NetworkSettings')
        networks = _expect_dict(data.get('Networks') or {}, 'NetworkSettings.Networks')
        return cls(networks={name: Network.from_dict(net) for name, net in networks.items()})


@dataclass(frozen=True)
class ContainerDescriptor:
    """Docker Container as returned by the listing endpoint"""

    id: str
    network_settings: NetworkSettings

    @classmethod
    def from_dict(cls, data: Any) -> 'ContainerDescriptor':
        data = _expect_dict(data, 'Container')
        return cls(
            id=_expect_str(data, 'Id', 'Container'),
            network_settings=NetworkSettings.from_dict(data.get('NetworkSettings') or {}),
        )


@dataclass(frozen=True)
class PortBinding:
    """Host side of a published port"""

    host_port: str

    def to_dict(self) -> Dict[str, Any]:
        return {'HostPort': self.host_port}


@dataclass(frozen=True)
class CreateContainer:
    """Base for the container creation bodies; use one of the subclasses"""

    image: str

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class PortBindingSpec(CreateContainer):
    """Create a container publishing container ports on the host"""

    port_bindings: Dict[str, List[PortBinding]] = field(default_factory=dict)

    @classmethod
    def single(cls, image: str, container_port: int, host_port: int) -> 'PortBindingSpec':
        """Bind one TCP container port to one host port"""
        return cls(
            image=image,
            port_bindings={f"{container_port}/tcp": [PortBinding(host_port=str(host_port))]},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'Image': self.image,
            'PortBindings': {
                port: [binding.to_dict() for binding in bindings]
                for port, bindings in self.port_bindings.items()
            },
        }


@dataclass(frozen=True)
class NetworkModeSpec(CreateContainer):
    """Create a container attached with a given network mode (e.g. host)"""

    network_mode: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'Image': self.image, 'NetworkMode': self.network_mode}


@dataclass(frozen=True)
class CreateContainerResult:
    """Daemon answer to a create request"""

    id: str

    @classmethod
    def from_dict(cls, data: Any) -> 'CreateContainerResult':
        data = _expect_dict(data, 'CreateContainerResult')
        return cls(id=_expect_str(data, 'Id', 'CreateContainerResult'))


def parse_object(text: str, factory: Callable[[Any], T], operation: str) -> T:
    """Decode a JSON object response, keeping the raw body in the error"""
    try:
        return factory(json.loads(text))
    except ValueError as e:
        raise ResponseParseError(
            f"Failed to parse {operation} response json: {text}", body=text
        ) from e


def parse_list(text: str, factory: Callable[[Any], T], operation: str) -> List[T]:
    """Decode a JSON array response, keeping the raw body in the error"""
    try:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return [factory(item) for item in data]
    except ValueError as e:
        raise ResponseParseError(
            f"Failed to parse {operation} response json: {text}", body=text
        ) from e
