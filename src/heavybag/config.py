import os
import logging

from importlib import resources

import hjson

logger = logging.getLogger(__name__)


#: Environment variables which take precedence over the packaged defaults
ENVIRONMENT_OVERRIDES = {
    "max_add_count": "HEAVYBAG_MAX_ADD_COUNT",
    "repr_limit": "HEAVYBAG_REPR_LIMIT",
}


def _open_packaged_defaults():
    return resources.files(__package__).joinpath("data/defaults.hjson").open("r")


class Defaults(dict):
    '''Package-wide settings read from an hjson document.

    Values are accessible both as items and as attributes, so
    ``defaults["repr_limit"]`` and ``defaults.repr_limit`` are equivalent.

    Parameters
    ----------
    stream: file-like, optional
        An hjson document to read. Defaults to the copy bundled
        with the package.
    environ: Mapping, optional
        Where to look for overrides listed in :data:`ENVIRONMENT_OVERRIDES`.
        Defaults to :data:`os.environ`.
    '''

    def __init__(self, stream=None, environ=None):
        if stream is None:
            stream = _open_packaged_defaults()
        with stream:
            self.update(hjson.load(stream))
        if environ is None:
            environ = os.environ
        self._apply_overrides(environ)

    def _apply_overrides(self, environ):
        for key, variable in ENVIRONMENT_OVERRIDES.items():
            raw = environ.get(variable)
            if raw is None:
                continue
            try:
                value = int(raw)
                if value < 0:
                    raise ValueError(raw)
            except ValueError:
                logger.warning("Ignoring %s=%r, expected a non-negative integer", variable, raw)
                continue
            logger.info("Overriding %s with %d from %s", key, value, variable)
            self[key] = value

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, dict.__repr__(self))


def load_defaults(stream=None, environ=None):
    return Defaults(stream, environ)


defaults = load_defaults()
