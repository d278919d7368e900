# posixopt POSIX Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for posixopt."""
import logging

logger: logging.Logger = logging.getLogger("posixopt")
