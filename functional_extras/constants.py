"""
Collection of global constants
"""

from typing import Final

# String form of an absent Maybe
NOTHING_REPR: Final[str] = "Nothing"
# String form of a present Maybe, formatted with repr() of the wrapped value
JUST_REPR: Final[str] = "Just({!r})"
# All Nothing instances share this hash
NOTHING_HASH: Final[int] = 0

# Prefix of configuration keys read by the logger
LOGGER_PREFIX: Final[str] = "logger"
# Loguru logger name of this package
PACKAGE_NAME: Final[str] = "functional_extras"
