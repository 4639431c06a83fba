'''
A counting multiset which stores each distinct element once, alongside the
number of times it occurs.

:class:`HeavyBag` is meant for collections where an element may be repeated
an enormous number of times. Adding a billion copies of an element costs one
dictionary entry and one integer, not a billion references.

>>> bag = HeavyBag()
>>> bag.add_many("a", 3)
True
>>> bag.add("b")
True
>>> len(bag)
4
>>> sorted(bag)
['a', 'a', 'a', 'b']
>>> bag.remove("a")
True
>>> bag.get_count("a")
2
'''
import random
import logging

from itertools import islice
from collections.abc import Mapping

from .collection import BagCollection
from .config import defaults
from .errors import InvalidCountError, EmptyBagError
from .iteration import HeavyBagIterator

logger = logging.getLogger(__name__)


class HeavyBag(BagCollection):
    '''A collection which permits duplicates and stores them by count.

    Removing an element removes a single copy of it, so a bag may still
    contain an element after it has been removed. Iterating over a bag
    produces every copy, all copies of one element in a row.

    Bulk operations such as :meth:`~.BagCollection.add_all` and
    :meth:`~.BagCollection.retain_all` come from :class:`~.BagCollection`.

    Attributes
    ----------
    _counts: dict
        Maps each distinct element to how many times it occurs. Counts are
        always positive; an element whose count reaches zero is deleted.
    _size: int
        The sum of all counts, kept up to date by every mutation
    '''

    __slots__ = ('_counts', '_size')

    def __init__(self, elements=None):
        self._counts = {}
        self._size = 0
        if elements is None:
            return
        if isinstance(elements, HeavyBag):
            self.__setstate__(elements._counts)
        elif isinstance(elements, Mapping):
            for element, count in elements.items():
                self.add_many(element, count)
        else:
            self.add_all(elements)

    def add(self, element):
        '''Add one copy of `element`.

        Returns
        -------
        bool:
            Always `True`, adding to a bag always changes it
        '''
        self._counts[element] = self._counts.get(element, 0) + 1
        self._size += 1
        return True

    def add_many(self, element, count):
        '''Add `count` copies of `element` at once.

        Parameters
        ----------
        element: object
            The element to add
        count: int
            The number of copies to add, between 0 and
            ``defaults.max_add_count`` inclusive. Adding 0 copies
            does nothing.

        Returns
        -------
        bool:
            Always `True`

        Raises
        ------
        InvalidCountError:
            If `count` is not an integer or is out of range. The bag is
            left untouched.
        '''
        limit = defaults.max_add_count
        if isinstance(count, bool) or not isinstance(count, int) or not 0 <= count <= limit:
            logger.debug("Rejecting add_many(%r, %r), limit is %d", element, count, limit)
            raise InvalidCountError(count, limit)
        if count:
            self._counts[element] = self._counts.get(element, 0) + count
            self._size += count
        return True

    def remove(self, element):
        '''Remove a single copy of `element`.

        Returns
        -------
        bool:
            Whether a copy of `element` was present and removed
        '''
        count = self._counts.get(element, 0)
        if count == 0:
            return False
        if count == 1:
            del self._counts[element]
        else:
            self._counts[element] = count - 1
        self._size -= 1
        return True

    discard = remove

    def clear(self):
        self._counts.clear()
        self._size = 0

    def __contains__(self, element):
        return element in self._counts

    contains = __contains__

    def get_count(self, element):
        '''The number of copies of `element` in the bag, 0 if it is absent'''
        return self._counts.get(element, 0)

    def unique_elements(self):
        '''A read-only view of the distinct elements in the bag.

        The view is live: it reflects later changes to the bag, but it cannot
        be used to change the bag. Take a copy with :func:`set` before
        mutating the bag while iterating over it.
        '''
        return self._counts.keys()

    def items(self):
        '''A read-only view of ``(element, count)`` pairs, live like
        :meth:`unique_elements`.
        '''
        return self._counts.items()

    def __len__(self):
        return self._size

    size = __len__

    def __iter__(self):
        return HeavyBagIterator(self)

    iterator = __iter__

    def choose(self, random_source=None):
        '''Pick one element at random, weighted by how many copies of it
        the bag holds. If the bag holds 7 ``"a"`` and 3 ``"b"``, ``"a"`` is
        returned 70% of the time.

        Takes time proportional to the number of distinct elements, and does
        not change the bag.

        Parameters
        ----------
        random_source: random.Random, optional
            Anything with a :meth:`randrange` method. Defaults to the
            :mod:`random` module's shared generator.

        Raises
        ------
        EmptyBagError:
            If the bag is empty
        '''
        if self._size == 0:
            logger.debug("choose() called on an empty bag")
            raise EmptyBagError("Cannot choose from an empty bag")
        if random_source is None:
            random_source = random
        target = random_source.randrange(self._size)
        running = 0
        for element, count in self._counts.items():
            running += count
            if running > target:
                return element
        raise RuntimeError("Counts sum to less than the recorded size %d" % self._size)

    def __eq__(self, other):
        if not isinstance(other, HeavyBag):
            return NotImplemented
        if self._counts.keys() != other._counts.keys():
            return False
        for element, count in self._counts.items():
            if other._counts[element] != count:
                return False
        return True

    def __hash__(self):
        # Bags are mutable, so the hash changes whenever the contents do
        return hash(frozenset(self._counts.items()))

    def __repr__(self):
        entries = ', '.join('%r: %d' % item for item in self._counts.items())
        return "{}({{{}}})".format(self.__class__.__name__, entries)

    def __str__(self):
        limit = defaults.repr_limit
        entries = ['%s: %d' % item for item in islice(self._counts.items(), limit)]
        if len(self._counts) > limit:
            entries.append('...')
        return "{}({{{}}})".format(self.__class__.__name__, ', '.join(entries))

    def __reduce__(self):
        return self.__class__, (), self.__getstate__()

    def __getstate__(self):
        return dict(self._counts)

    def __setstate__(self, state):
        self._counts = dict(state)
        self._size = sum(self._counts.values())

    def copy(self):
        new = self.__class__()
        new.__setstate__(self._counts)
        return new

    def clone(self):
        return self.copy()
