"""Integration package for external services and agent tools."""

from .agent_tools import get_default_tools

__all__ = ["get_default_tools"]
