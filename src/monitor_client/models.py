"""
Deployment resource models and the fluent DeploymentBuilder.

Field names follow the monitor API wire schema: camelCase, except for the
identifier (``_id``), the server identifier (``serverID``) and the build
identifier (``buildID``). Optional fields without a value are never sent.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import BuilderConsumedError
from .utils.json import enum_as_string

log = logging.getLogger(__name__)


class RestartMode(str, Enum):
    """Container restart policy, valued by its wire string."""

    NO_RESTART = "no"
    UNLESS_STOPPED = "unless-stopped"
    ON_FAILURE = "on-failure"
    ALWAYS = "always"


class WireModel(BaseModel):
    """Base class for models exchanged with the monitor API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        serialize_by_alias=True,
    )

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready payload, omitting fields that have no value."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Conversion(WireModel):
    """Local to container mapping, used for both ports and volumes."""

    local: str
    container: str


class EnvironmentVar(WireModel):
    variable: str
    value: str


class LoginCredentials(WireModel):
    username: str
    password: str


class Deployment(WireModel):
    """
    A containerized application deployment on a monitored server.

    ``id`` is assigned by the server and stays ``None`` until the deployment
    has been created.
    """

    id: Optional[str] = Field(default=None, alias="_id")
    name: str
    server_id: str = Field(alias="serverID")
    build_id: Optional[str] = Field(default=None, alias="buildID")
    image: Optional[str] = None
    ports: Optional[List[Conversion]] = None
    volumes: Optional[List[Conversion]] = None
    environment: Optional[List[EnvironmentVar]] = None
    network: Optional[str] = None
    restart: Optional[str] = None
    container_user: Optional[str] = None
    docker_account: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def unwrap_object_id(cls, value: Any) -> Any:
        """Accept MongoDB extended JSON ids such as ``{"$oid": "..."}``."""
        if isinstance(value, dict) and "$oid" in value:
            return value["$oid"]
        return value

    @classmethod
    def builder(cls) -> "DeploymentBuilder":
        return DeploymentBuilder()

    @property
    def is_created(self) -> bool:
        "Returns True if the deployment has a server-assigned identifier."
        return self.id is not None

    @property
    def restart_mode(self) -> Optional[RestartMode]:
        """Parsed restart policy. Unknown wire strings raise ValueError."""
        if self.restart is None:
            return None
        return RestartMode(self.restart)

    def into_create_body(self) -> "CreateDeploymentBody":
        return CreateDeploymentBody(deployment=self)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}:{self.id or self.name}"


class CreateDeploymentBody(WireModel):
    deployment: Deployment


class DeploymentBuilder:
    """
    Fluent accumulator for a Deployment.

    Every setter returns the builder so calls can be chained. ``build()``
    hands the finished Deployment over and leaves the builder unusable.

    Example:
        deployment = (
            Deployment.builder()
            .name("api")
            .server_id("server-1")
            .image("nginx:latest")
            .add_port("8080", "80")
            .restart(RestartMode.UNLESS_STOPPED)
            .build()
        )
    """

    def __init__(self):
        self._deployment: Optional[Deployment] = Deployment(name="", server_id="")

    @property
    def _current(self) -> Deployment:
        if self._deployment is None:
            raise BuilderConsumedError()
        return self._deployment

    def name(self, name: str) -> "DeploymentBuilder":
        self._current.name = name
        return self

    def server_id(self, server_id: str) -> "DeploymentBuilder":
        self._current.server_id = server_id
        return self

    def build_id(self, build_id: Optional[str]) -> "DeploymentBuilder":
        self._current.build_id = build_id
        return self

    def image(self, image: Optional[str]) -> "DeploymentBuilder":
        self._current.image = image
        return self

    def docker_account(self, docker_account: Optional[str]) -> "DeploymentBuilder":
        self._current.docker_account = docker_account
        return self

    def container_user(self, container_user: Optional[str]) -> "DeploymentBuilder":
        self._current.container_user = container_user
        return self

    def network(self, network: str) -> "DeploymentBuilder":
        self._current.network = network
        return self

    def restart(self, restart: RestartMode) -> "DeploymentBuilder":
        self._current.restart = enum_as_string(restart)
        return self

    def add_environment(self, variable: str, value: str) -> "DeploymentBuilder":
        deployment = self._current
        env_var = EnvironmentVar(variable=variable, value=value)
        if deployment.environment is None:
            deployment.environment = []
        deployment.environment.append(env_var)
        return self

    def add_port(self, local: str, container: str) -> "DeploymentBuilder":
        deployment = self._current
        port = Conversion(local=local, container=container)
        if deployment.ports is None:
            deployment.ports = []
        deployment.ports.append(port)
        return self

    def add_volume(self, local: str, container: str) -> "DeploymentBuilder":
        deployment = self._current
        volume = Conversion(local=local, container=container)
        if deployment.volumes is None:
            deployment.volumes = []
        deployment.volumes.append(volume)
        return self

    def build(self) -> Deployment:
        deployment = self._current
        self._deployment = None
        log.debug(f"Built {deployment}")
        return deployment
