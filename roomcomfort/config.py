"""
Configuration module for the Room Comfort Monitor.

Settings come from environment variables, optionally loaded from a .env file
in the working directory. Components read their settings in their
constructors; an explicit constructor argument always wins over the
environment, and an unusable environment value falls back to the default.
"""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

INTERVAL_SECONDS_VAR = "ROOMCOMFORT_INTERVAL_SECONDS"
NOTIFICATION_RATE_VAR = "ROOMCOMFORT_NOTIFICATION_RATE"
LOG_FILE_VAR = "ROOMCOMFORT_LOG_FILE"


def env_float(
    name: str,
    default: float,
    component: str,
    minimum: Optional[float] = None,
    maximum: Optional[float] = None
) -> float:
    """
    Reads a float setting from the environment.
    
    Args:
        name: Environment variable name
        default: Value used when the variable is unset or invalid
        component: Component name used to prefix diagnostic messages
        minimum: Optional inclusive lower limit
        maximum: Optional inclusive upper limit
    
    Returns:
        The parsed value, or default
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    
    try:
        value = float(raw)
    except ValueError:
        print(f"{component}: {name}={raw!r} is not a number, using {default}")
        return default
    
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        print(f"{component}: {name}={raw!r} is out of range, using {default}")
        return default
    
    return value


def env_str(name: str, default: str) -> str:
    """Reads a string setting from the environment, or returns default when unset."""
    raw = os.getenv(name, "").strip()
    return raw or default
