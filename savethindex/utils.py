import os
from typing import Optional

from dotenv import load_dotenv


def load_environment() -> None:
    """Loads variables from a local .env file into the environment."""
    load_dotenv(override=True)


def get_endpoint(value: Optional[str], envvar: str, default: Optional[str] = None) -> str:
    """
    Returns the endpoint given on the command line, falling back to the
    environment variable and then to the default.
    """
    endpoint = value or os.environ.get(envvar) or default
    if not endpoint:
        raise ValueError(f"No endpoint provided and {envvar} is not set.")
    return endpoint.strip()
