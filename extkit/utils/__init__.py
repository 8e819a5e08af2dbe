"""Utility modules for extkit."""

from .env import get_env_var, list_env_vars, setup_environment

__all__ = ["setup_environment", "get_env_var", "list_env_vars"]
