"""Configuration module for the Reddit listing client."""

from .settings import ClientConfig, build_user_agent

__all__ = ["ClientConfig", "build_user_agent"]
