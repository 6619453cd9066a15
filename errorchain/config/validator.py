# errorchain/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Literal

if TYPE_CHECKING:
    from .loader import OTelConfig, StackConfig

# Captures deeper than this cost more than they tell.
MAX_USEFUL_DEPTH = 256


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "stack.depth"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f" (hint: {self.hint})" if self.hint else ""
        return f"[{self.level}] {self.path}: {self.message}{hint_str}"


def validate_config(stack: "StackConfig", otel: "OTelConfig") -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not isinstance(stack.depth, int) or isinstance(stack.depth, bool):
        issues.append(ConfigIssue(
            level="error",
            path="stack.depth",
            message=f"depth must be an integer, got {stack.depth!r}",
        ))
    elif stack.depth <= 0:
        issues.append(ConfigIssue(
            level="error",
            path="stack.depth",
            message="depth must be positive",
            hint="Use the default of 32 frames",
        ))
    elif stack.depth > MAX_USEFUL_DEPTH:
        issues.append(ConfigIssue(
            level="warn",
            path="stack.depth",
            message=f"depth={stack.depth} makes every stack-capturing wrap expensive",
            hint=f"Keep depth at or below {MAX_USEFUL_DEPTH}",
        ))

    # OTel: enabled but nowhere to send spans (warning)
    if otel.enabled and not otel.endpoint:
        issues.append(ConfigIssue(
            level="warn",
            path="otel.endpoint",
            message="otel.enabled=true without an endpoint; the OTLP exporter default will be used",
            hint="Set otel.endpoint or OTEL_EXPORTER_OTLP_ENDPOINT",
        ))

    return issues
