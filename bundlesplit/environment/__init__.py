"""Build-mode driven environment module selection."""

from .selector import EnvironmentSelector, select

__all__ = ["EnvironmentSelector", "select"]
