"""
Monitoring and observability for the response simulator.
"""

from .logging import LoggingConfig, StructuredFormatter, get_logger

__all__ = ["LoggingConfig", "StructuredFormatter", "get_logger"]
