from .common import *
from .logging import *
from .wrappers import *

__all__ = [
    "config_logger",
    "curry",
    "logger_wraps",
    "side_effect",
]
