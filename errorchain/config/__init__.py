# errorchain/config/__init__.py
"""
errorchain Configuration

Code defaults are the truth; YAML and environment variables are optional
input. Nothing is read from disk on import.
"""

from .loader import (
    StackConfig,
    OTelConfig,
    ErrorChainConfig,
    load_config,
    get_config,
    set_config,
)
from .validator import validate_config, ConfigIssue

__all__ = [
    "StackConfig",
    "OTelConfig",
    "ErrorChainConfig",
    "load_config",
    "get_config",
    "set_config",
    "validate_config",
    "ConfigIssue",
]
