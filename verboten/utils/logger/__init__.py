__all__ = ["init_logger"]

from .logger import init_logger
