from abc import ABCMeta, abstractmethod


class RemovableIterator(object, metaclass=ABCMeta):
    '''An iterator which can delete the element it most recently produced
    from the collection it is traversing.
    '''

    __slots__ = ()

    def __iter__(self):
        return self

    @abstractmethod
    def __next__(self):  # pragma: no cover
        raise NotImplementedError()

    @abstractmethod
    def has_next(self):  # pragma: no cover
        raise NotImplementedError()

    @abstractmethod
    def remove(self):  # pragma: no cover
        '''Remove the element last returned by :meth:`__next__` from the
        underlying collection.
        '''
        raise NotImplementedError()


class BagCollection(object, metaclass=ABCMeta):
    '''A collection built from five primitives: :meth:`add`, :meth:`remove`,
    ``in``, :func:`len` and an iterator supporting
    :meth:`RemovableIterator.remove`.

    The bulk operations :meth:`add_all`, :meth:`remove_all`, :meth:`retain_all`
    and :meth:`contains_all` are derived from those primitives alone, so any
    implementation which gets the primitives right gets the bulk operations
    for free. Implementations should not override them.
    '''

    __slots__ = ()

    @abstractmethod
    def add(self, element):  # pragma: no cover
        raise NotImplementedError()

    @abstractmethod
    def remove(self, element):  # pragma: no cover
        raise NotImplementedError()

    @abstractmethod
    def __contains__(self, element):  # pragma: no cover
        raise NotImplementedError()

    @abstractmethod
    def __len__(self):  # pragma: no cover
        raise NotImplementedError()

    @abstractmethod
    def __iter__(self):  # pragma: no cover
        '''Returns a :class:`RemovableIterator` over every element,
        including duplicates.
        '''
        raise NotImplementedError()

    def is_empty(self):
        return len(self) == 0

    def add_all(self, elements):
        '''Add every element of `elements`.

        Returns
        -------
        bool:
            Whether the collection changed
        '''
        modified = False
        for element in elements:
            if self.add(element):
                modified = True
        return modified

    def contains_all(self, elements):
        for element in elements:
            if element not in self:
                return False
        return True

    def _remove_where(self, predicate):
        modified = False
        iterator = iter(self)
        while iterator.has_next():
            if predicate(next(iterator)):
                iterator.remove()
                modified = True
        return modified

    def remove_all(self, elements):
        '''Remove every instance of each value found in `elements`.

        Unlike calling :meth:`remove` once per item, this removes all
        duplicates of a matching value.

        Returns
        -------
        bool:
            Whether the collection changed
        '''
        elements = _as_container(elements)
        return self._remove_where(lambda element: element in elements)

    def retain_all(self, elements):
        '''Remove every instance whose value is not found in `elements`.

        Returns
        -------
        bool:
            Whether the collection changed
        '''
        elements = _as_container(elements)
        return self._remove_where(lambda element: element not in elements)


def _as_container(elements):
    # One-shot iterables would be exhausted after the first membership test
    if hasattr(elements, "__contains__"):
        return elements
    return list(elements)
