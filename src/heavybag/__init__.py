from heavybag import config
from heavybag.bag import HeavyBag
from heavybag.iteration import HeavyBagIterator
from heavybag.collection import BagCollection, RemovableIterator
from heavybag.errors import HeavyBagError, InvalidCountError, IllegalStateError, EmptyBagError
from heavybag.version import version as __version__


__all__ = [
    "config", "bag", "collection", "iteration", "errors",
    "HeavyBag", "HeavyBagIterator", "BagCollection", "RemovableIterator",
    "HeavyBagError", "InvalidCountError", "IllegalStateError", "EmptyBagError",
]
