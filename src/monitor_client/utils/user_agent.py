"""User-Agent utilities for monitor client HTTP requests."""

import platform
from importlib import metadata


def get_user_agent() -> str:
    """
    Generate the User-Agent string sent with every request.

    Format: monitor-client/<version> (<OS> <release>; <arch>) Language/Python <python_version>
    Example: monitor-client/0.1.0 (Linux 6.8.0-49-generic; x86_64) Language/Python 3.12.4

    Returns:
        str: Formatted User-Agent string
    """
    try:
        client_version = metadata.version("monitor-client")
    except metadata.PackageNotFoundError:
        client_version = "unknown"

    system = platform.system()
    release = platform.release()
    machine = platform.machine()
    python_version = platform.python_version()

    return f"monitor-client/{client_version} ({system} {release}; {machine}) Language/Python {python_version}"
