# errorchain/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Environment variables override both
- Library works without YAML
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .validator import ConfigIssue, validate_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StackConfig:
    """Stack capture settings"""
    depth: int = 32


@dataclass(frozen=True)
class OTelConfig:
    """OpenTelemetry reporting settings"""
    enabled: bool = False
    service_name: str = "errorchain"
    endpoint: Optional[str] = None
    insecure: bool = False


@dataclass(frozen=True)
class ErrorChainConfig:
    """
    Unified errorchain configuration.

    All fields have code defaults - YAML is optional.
    """
    stack: StackConfig = field(default_factory=StackConfig)
    otel: OTelConfig = field(default_factory=OTelConfig)

    @classmethod
    def default(cls) -> "ErrorChainConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ErrorChainConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.errorchain/config.yml

        Returns:
            ErrorChainConfig instance (always has code defaults as fallback)
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        if isinstance(yaml_data.get("stack"), dict):
            config = replace(config, stack=_merge_config(config.stack, yaml_data["stack"]))

        if isinstance(yaml_data.get("otel"), dict):
            config = replace(config, otel=_merge_config(config.otel, yaml_data["otel"]))

        return config

    def with_env(self, environ: Optional[Dict[str, str]] = None) -> "ErrorChainConfig":
        """Apply environment variable overrides"""
        env = os.environ if environ is None else environ

        stack = self.stack
        depth = _getenv(env, "ERRORCHAIN_STACK_DEPTH")
        if depth is not None:
            try:
                stack = replace(stack, depth=int(depth))
            except ValueError:
                logger.warning("Ignoring non-integer ERRORCHAIN_STACK_DEPTH=%r", depth)

        otel = self.otel
        endpoint = _getenv(env, "OTEL_EXPORTER_OTLP_ENDPOINT")
        enabled = _getenv(env, "ERRORCHAIN_OTEL")
        if endpoint is not None:
            otel = replace(otel, endpoint=endpoint)
        if enabled is not None or endpoint is not None:
            otel = replace(otel, enabled=_truthy(enabled) or endpoint is not None)

        service_name = _getenv(env, "OTEL_SERVICE_NAME") or _getenv(env, "ERRORCHAIN_OTEL_SERVICE_NAME")
        if service_name is not None:
            otel = replace(otel, service_name=service_name)

        insecure = _getenv(env, "OTEL_EXPORTER_OTLP_INSECURE")
        if insecure is not None:
            otel = replace(otel, insecure=_truthy(insecure))

        return replace(self, stack=stack, otel=otel)

    def validate(self) -> List[ConfigIssue]:
        """
        Validate configuration for illegal/misleading combinations.

        Returns:
            List of issues (warn/error level)
        """
        return validate_config(self.stack, self.otel)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "stack": asdict(self.stack),
            "otel": asdict(self.otel),
        }


def _getenv(env, name: str) -> Optional[str]:
    v = env.get(name)
    if v is None:
        return None
    v = v.strip()
    return v or None


def _truthy(v: Optional[str]) -> bool:
    if v is None:
        return False
    return v.lower() in {"1", "true", "yes", "y", "on"}


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if config_path:
        paths = [Path(config_path)]
    else:
        paths = [Path.home() / ".errorchain" / "config.yml"]

    for path in paths:
        if not path.exists():
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Failed to read %s, using code defaults: %s", path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: top level is not a mapping", path)
            return None
        return data

    logger.debug("No errorchain config file found, using code defaults")
    return None


def _merge_config(default_instance, yaml_data: Dict[str, Any]):
    """Merge YAML data into default config instance"""
    known = {f.name for f in fields(default_instance)}
    unknown = sorted(set(yaml_data) - known)
    if unknown:
        logger.warning("Ignoring unknown %s keys: %s", type(default_instance).__name__, ", ".join(unknown))
    return replace(default_instance, **{k: v for k, v in yaml_data.items() if k in known})


_active: ErrorChainConfig = ErrorChainConfig.default()


def load_config(config_path: Optional[Path] = None, *, environ: Optional[Dict[str, str]] = None) -> ErrorChainConfig:
    """
    Load errorchain configuration.

    Args:
        config_path: Optional path to YAML file
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ErrorChainConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Loading does not install the result; call set_config() for that
    """
    return ErrorChainConfig.from_yaml(config_path).with_env(environ)


def get_config() -> ErrorChainConfig:
    """Process-wide configuration used by stack capture and tracing"""
    return _active


def set_config(config: ErrorChainConfig) -> ErrorChainConfig:
    """
    Install the process-wide configuration.

    Call once at startup, before errors are created concurrently.

    Raises:
        ValueError: configuration has error-level issues
    """
    global _active
    issues = config.validate()
    errors = [issue for issue in issues if issue.level == "error"]
    if errors:
        raise ValueError("invalid errorchain configuration: " + "; ".join(i.message for i in errors))
    for issue in issues:
        logger.warning("%s", issue)
    previous, _active = _active, config
    return previous
