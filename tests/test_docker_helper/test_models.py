"""Serialization of request and response payloads."""

from __future__ import annotations

import json

import pytest

from src.docker_helper.endpoints import encode_json
from src.docker_helper.exceptions import ResponseParseError
from src.docker_helper.models import (
    ContainerDescriptor,
    CreateContainerResult,
    ImageDescriptor,
    NetworkModeSpec,
    PortBindingSpec,
    parse_list,
    parse_object,
)


def test_port_binding_spec_wire_format() -> None:
    """Port binding body uses the daemon field names and nothing else."""

    spec = PortBindingSpec.single("ubuntu:20.04", 80, 81)
    assert encode_json(spec.to_dict()) == (
        b'{"Image":"ubuntu:20.04","PortBindings":{"80/tcp":[{"HostPort":"81"}]}}'
    )


def test_network_mode_spec_has_no_port_bindings() -> None:
    """Network mode body carries only Image and NetworkMode."""

    body = NetworkModeSpec(image="redis:7", network_mode="host").to_dict()
    assert body == {"Image": "redis:7", "NetworkMode": "host"}


def test_container_descriptor_from_dict() -> None:
    """Nested network settings are decoded into typed objects."""

    container = ContainerDescriptor.from_dict(
        {
            "Id": "x",
            "Names": ["/demo"],
            "NetworkSettings": {"Networks": {"bridge": {"IPAddress": "172.17.0.2"}}},
        }
    )
    assert container.id == "x"
    assert container.network_settings.networks["bridge"].ip_address == "172.17.0.2"


def test_container_descriptor_without_networks() -> None:
    """A container listed without NetworkSettings has an empty network map."""

    container = ContainerDescriptor.from_dict({"Id": "x"})
    assert container.network_settings.networks == {}


def test_parse_list_images() -> None:
    images = parse_list('[{"Id":"abc123"}]', ImageDescriptor.from_dict, "find_images")
    assert images == [ImageDescriptor(id="abc123")]


@pytest.mark.parametrize("body", ["not json", '{"Id":"abc"}', '[{"Name":"abc"}]', "[1]"])
def test_parse_list_rejects_bad_body(body: str) -> None:
    """Invalid JSON and unexpected shapes raise with the raw body in the message."""

    with pytest.raises(ResponseParseError) as excinfo:
        parse_list(body, ImageDescriptor.from_dict, "find_images")
    assert body in str(excinfo.value)
    assert "find_images" in str(excinfo.value)
    assert excinfo.value.body == body


def test_parse_object_empty_body() -> None:
    with pytest.raises(ResponseParseError):
        parse_object("", CreateContainerResult.from_dict, "create_container")


def test_parse_object_create_result() -> None:
    body = json.dumps({"Id": "c1", "Warnings": []})
    result = parse_object(body, CreateContainerResult.from_dict, "create_container")
    assert result.id == "c1"
