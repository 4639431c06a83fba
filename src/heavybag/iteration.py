import logging

from .collection import RemovableIterator
from .errors import IllegalStateError

logger = logging.getLogger(__name__)


class HeavyBagIterator(RemovableIterator):
    '''Walks the distinct elements of a :class:`~heavybag.bag.HeavyBag`,
    producing each one as many times as it is counted.

    All copies of an element are produced consecutively before the iterator
    moves on to the next distinct element. The order of distinct elements is
    the bag's key storage order.

    The distinct elements are captured when the iterator is created, so
    :meth:`remove` may delete the last copy of an element without disturbing
    the traversal. Mutating the bag through any other path while an iterator
    is live is not detected, and what the iterator produces afterwards is
    unspecified.

    Attributes
    ----------
    bag: HeavyBag
        The bag being traversed
    position: int
        The number of elements produced so far which are still in the bag
    current: object
        The element most recently produced
    remaining: int
        How many more times :attr:`current` will be produced before advancing
    '''

    __slots__ = ('bag', 'position', 'current', 'remaining', '_keys', '_cursor', '_can_remove')

    def __init__(self, bag):
        self.bag = bag
        self.position = 0
        self.current = None
        self.remaining = 0
        self._keys = list(bag.unique_elements())
        self._cursor = 0
        self._can_remove = False

    def has_next(self):
        return self.position < len(self.bag)

    def _advance(self):
        while self._cursor < len(self._keys):
            key = self._keys[self._cursor]
            self._cursor += 1
            count = self.bag.get_count(key)
            if count > 0:
                self.current = key
                self.remaining = count - 1
                return
        raise StopIteration()

    def __next__(self):
        if self.remaining > 0:
            self.remaining -= 1
        else:
            self._advance()
        self.position += 1
        self._can_remove = True
        return self.current

    def remove(self):
        '''Remove one copy of :attr:`current` from the bag.

        Raises
        ------
        IllegalStateError:
            If :meth:`__next__` has not been called since the iterator was
            created or since the last call to :meth:`remove`
        '''
        if not self._can_remove:
            logger.debug("remove() called on %r with no element to remove", self)
            raise IllegalStateError("remove() requires a preceding call to next()")
        self._can_remove = False
        if self.bag.remove(self.current):
            self.position -= 1

    def __repr__(self):  # pragma: no cover
        return "<{} position={} current={!r} remaining={}>".format(
            self.__class__.__name__, self.position, self.current, self.remaining)
