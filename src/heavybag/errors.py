class HeavyBagError(Exception):
    pass


class InvalidCountError(HeavyBagError, ValueError):
    '''Raised when :meth:`~heavybag.bag.HeavyBag.add_many` receives a count
    that is not an integer in the accepted range. The bag is never modified
    when this is raised.
    '''

    def __init__(self, count, limit):
        self.count = count
        self.limit = limit
        super(InvalidCountError, self).__init__(
            "count must be an integer between 0 and {}, got {!r}".format(limit, count))


class IllegalStateError(HeavyBagError, RuntimeError):
    pass


class EmptyBagError(IllegalStateError):
    pass
