from loguru import logger

from .category import Maybe
from .config import configuration
from .utils import config_logger

config_logger(**configuration())  # type: ignore

for raw in ["42", "forty-two", None]:
    result = (
        Maybe.of_nullable(raw)
        .checked_map(int)
        .filter(lambda n: n > 0)
        .map(lambda n: n * 2)
    )
    logger.info(f"{raw!r} -> {result}")
