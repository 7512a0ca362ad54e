"""Structured logging package."""

from calcsuite.audit.logger import get_logger

__all__ = ["get_logger"]
