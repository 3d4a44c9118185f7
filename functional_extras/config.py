"""
Reads configuration from a yaml file and returns a dictionary of configuration settings

A configuration object is a dictionary where each key has the format <prefix>__<parameter>.
"""

import inspect
import sys
from functools import cache, reduce, wraps

import toolz as tz
import yaml
from toolz import curried

from . import constants as c

_with_prefix = lambda prefix, dict_: tz.keymap(lambda k: f"{prefix}__{k}", dict_)


@cache
def _load(config_path: str) -> dict:
    with open(config_path, "r") as file:
        return yaml.safe_load(file) or {}


def logger_config(config_path: str = "configuration.yaml") -> dict:
    """
    The `logger` section, keys prefixed with `logger__`

    A new dictionary is returned on every call.
    """
    config = dict(_load(config_path).get(c.LOGGER_PREFIX, {}))

    # Replace string with corresponding file object if present
    mapping = {"stdout": sys.stdout, "stderr": sys.stderr}
    sink = config.get("sink", "stderr")
    config["sink"] = mapping.get(sink, sink)

    # No retention for stdout and stderr
    if config["sink"] in [sys.stdout, sys.stderr]:
        config["retention"] = None
    return _with_prefix(c.LOGGER_PREFIX, config)


def configuration(config_path: str = "configuration.yaml") -> dict:
    """
    The entire configuration for the project
    """
    return reduce(tz.merge, [logger_config(config_path)], {})


def auto_match_config(*, prefixes: list[str]):
    """
    Pass `<prefix>__<parameter>` configuration values to function parameters

    Keys whose prefix is one of `prefixes` are passed, prefix stripped, to
    the parameter of the same name. Keys with other prefixes and keys
    naming no parameter are dropped. A plain keyword argument such as
    `level="DEBUG"` takes precedence over `logger__level` in the same call.

    Examples
    --------
    >>> @auto_match_config(prefixes=["logger"])
    ... def show(level, sink="stderr"):
    ...    print(level, sink)
    >>> show(**{"logger__level": "DEBUG", "other__level": "INFO"})
    DEBUG stderr
    """

    def split_key(key: str) -> tuple[str | None, str]:
        prefix, sep, name = key.partition("__")
        return (prefix, name) if sep else (None, key)

    def wrapper(func):
        params = inspect.signature(func).parameters

        @wraps(func)
        def wrapped(*args, **kwargs):
            split = tz.keymap(split_key, kwargs)
            from_config = tz.pipe(
                split,
                curried.keyfilter(lambda k: k[0] in prefixes),
                curried.keymap(lambda k: k[1]),
            )
            explicit = tz.pipe(
                split,
                curried.keyfilter(lambda k: k[0] is None),
                curried.keymap(lambda k: k[1]),
            )
            matched = tz.keyfilter(lambda k: k in params, tz.merge(from_config, explicit))
            return func(*args, **matched)

        return wrapped

    return wrapper
