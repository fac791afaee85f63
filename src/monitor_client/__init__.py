from .client import Client
from .exceptions import (
    BuilderConsumedError,
    LoginError,
    MonitorClientError,
    ResponseDecodeError,
    ResponseError,
    ResponseStatusError,
    TransportError,
)
from .logger import setup_logging
from .models import (
    Conversion,
    CreateDeploymentBody,
    Deployment,
    DeploymentBuilder,
    EnvironmentVar,
    LoginCredentials,
    RestartMode,
)
from .utils.json import enum_as_string

__all__ = [
    "BuilderConsumedError",
    "Client",
    "Conversion",
    "CreateDeploymentBody",
    "Deployment",
    "DeploymentBuilder",
    "EnvironmentVar",
    "LoginCredentials",
    "LoginError",
    "MonitorClientError",
    "ResponseDecodeError",
    "ResponseError",
    "ResponseStatusError",
    "RestartMode",
    "TransportError",
    "enum_as_string",
    "setup_logging",
]
