"""Configuration constants for the monitor client."""

# HTTP client configuration
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds

# Endpoint paths, relative to the normalized base URL
LOGIN_PATH = "/login/local"
CREATE_DEPLOYMENT_PATH = "/api/deployment/create"
DEPLOYMENT_PATH = "/api/deployment/{deployment_id}"
DEPLOY_DEPLOYMENT_PATH = "/api/deployment/{deployment_id}/deploy"
DELETE_DEPLOYMENT_PATH = "/api/deployment/{deployment_id}/delete"
LIST_DEPLOYMENTS_PATH = "/api/deployments"
