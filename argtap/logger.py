# Argtap CLI Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argtap."""
import logging

logger: logging.Logger = logging.getLogger("argtap")
