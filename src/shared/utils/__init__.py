"""Logging and environment helpers shared by the review generation entry points."""

from .env import load_env
from .logging import setup_logging

__all__ = ["load_env", "setup_logging"]
