"""Tests for the User-Agent string."""

from importlib import metadata
from unittest.mock import patch

from monitor_client.utils.user_agent import get_user_agent


def test_user_agent_format():
    with patch("monitor_client.utils.user_agent.platform") as mock_platform:
        mock_platform.system.return_value = "Linux"
        mock_platform.release.return_value = "6.8.0"
        mock_platform.machine.return_value = "x86_64"
        mock_platform.python_version.return_value = "3.12.4"
        with patch(
            "monitor_client.utils.user_agent.metadata.version", return_value="0.1.0"
        ):
            user_agent = get_user_agent()

    assert user_agent == "monitor-client/0.1.0 (Linux 6.8.0; x86_64) Language/Python 3.12.4"


def test_user_agent_unknown_version():
    with patch(
        "monitor_client.utils.user_agent.metadata.version",
        side_effect=metadata.PackageNotFoundError("monitor-client"),
    ):
        user_agent = get_user_agent()

    assert user_agent.startswith("monitor-client/unknown (")
