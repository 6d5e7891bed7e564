# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Optgrid."""
import logging

logger: logging.Logger = logging.getLogger("optgrid")
