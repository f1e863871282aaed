"""bundlesplit CLI commands package - modular command implementations."""

from .classify import classify_command, plan_command
from .env import env_command
from .config import config_command

__all__ = [
    "classify_command",
    "plan_command",
    "env_command",
    "config_command",
]
