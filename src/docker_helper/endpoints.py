"""
Request builders for the Docker Engine API endpoints used by this package
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

from .models import ContainerFilter, CreateContainer, ImageFilter


@dataclass(frozen=True)
class APIRequest:
    """Method, path (with query string) and optional JSON body of one call"""

    method: str
    path: str
    body: Optional[bytes] = None


def encode_json(data: Dict[str, Any]) -> bytes:
    """Serialize a payload the way the daemon expects it (compact UTF-8 JSON)"""
    return json.dumps(data, separators=(',', ':')).encode('utf-8')


def encode_filters(filters: Dict[str, Any]) -> str:
    """
    Encode a filter object as the value of the `filters` query parameter

    The daemon expects JSON inside the query string, percent-encoded as a whole.
    """
    return quote(json.dumps(filters, separators=(',', ':')), safe='')


def pull_image(image_name: str) -> APIRequest:
    return APIRequest('POST', f'/images/create?fromImage={image_name}')


def find_images(reference: str) -> APIRequest:
    filters = ImageFilter(reference=[reference]).to_dict()
    return APIRequest('GET', f'/images/json?filters={encode_filters(filters)}')


def create_container(container_name: str, spec: CreateContainer) -> APIRequest:
    return APIRequest(
        'POST',
        f'/containers/create?name={container_name}',
        body=encode_json(spec.to_dict()),
    )


def start_container(container_id: str) -> APIRequest:
    return APIRequest('POST', f'/containers/{container_id}/start')


def stop_container(container_id: str) -> APIRequest:
    return APIRequest('POST', f'/containers/{container_id}/stop')


def delete_container(container_id: str) -> APIRequest:
    return APIRequest('DELETE', f'/containers/{container_id}')


def prune_containers() -> APIRequest:
    return APIRequest('POST', '/containers/prune')


def find_containers(container_id: str) -> APIRequest:
    filters = ContainerFilter(id=[container_id]).to_dict()
    return APIRequest('GET', f'/containers/json?filters={encode_filters(filters)}')


def ping() -> APIRequest:
    return APIRequest('GET', '/_ping')


def version() -> APIRequest:
    return APIRequest('GET', '/version')
