from loguru import logger

logger.disable("functional_extras")

from . import category, constants, utils
from .category import (
    Either,
    InvalidStateError,
    Maybe,
    NullArgumentError,
    Validation,
    maybe_map,
    require_non_null,
)
from .config import auto_match_config, configuration, logger_config

__all__ = [
    "category",
    "constants",
    "utils",
    "Either",
    "InvalidStateError",
    "Maybe",
    "NullArgumentError",
    "Validation",
    "maybe_map",
    "require_non_null",
    "auto_match_config",
    "configuration",
    "logger_config",
]
