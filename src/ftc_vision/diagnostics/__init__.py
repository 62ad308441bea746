"""Diagnostics module - per-frame performance logging."""

from .performance_logger import PerformanceLogger, get_logger

__all__ = ['PerformanceLogger', 'get_logger']
