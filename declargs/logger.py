# Declargs Command Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for declargs."""
import logging

logger: logging.Logger = logging.getLogger("declargs")
