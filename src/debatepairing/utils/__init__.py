"""Shared utilities for Debate Pairing."""

from debatepairing.utils.logging import set_package_level, setup_logger

__all__ = ["set_package_level", "setup_logger"]
