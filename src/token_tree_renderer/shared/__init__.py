"""Shared utilities for the token tree renderer.

Configuration objects, diagnostic/metric types and the correlation-aware
logger used across all rendering layers.
"""

from .config import ConfigError, ConfigValidationError, RendererConfig
from .logging import CorrelationLogger, get_logger
from .result import DiagnosticEntry, DiagnosticSeverity, PerformanceMetrics

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "RendererConfig",
    "CorrelationLogger",
    "get_logger",
    "DiagnosticEntry",
    "DiagnosticSeverity",
    "PerformanceMetrics",
]
