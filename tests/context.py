"""
Path modification to resolve package name

add `from .context import functional_extras` to test modules
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import functional_extras

# Import aliases
category = functional_extras.category
config = functional_extras.config
constants = functional_extras.constants
utils = functional_extras.utils

Maybe = category.Maybe
Either = category.Either
Validation = category.Validation
NullArgumentError = category.NullArgumentError
InvalidStateError = category.InvalidStateError

# Patch paths
PATCH_LOGGER = "functional_extras.category.maybe.logger"
