"""A small ordered two-way map built on a list of pairs."""


class NoValueError(KeyError):
    """Raised when no value is associated with the looked-up key."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return "No associated value!!!"


class BiMap:
    """An ordered collection of pairs that can be looked up from either side."""

    def __init__(self, pairs=()):
        self._pairs = []
        self.extend(pairs)

    @staticmethod
    def _as_pair(pair):
        pair = tuple(pair)
        if len(pair) != 2:
            raise ValueError(f"expected a pair, got {len(pair)} items")
        return pair

    def first_for(self, second):
        """Return the first item of the first pair whose second item equals ``second``."""
        for first, other in self._pairs:
            if other == second:
                return first
        raise NoValueError(second)

    def second_for(self, first):
        """Return the second item of the first pair whose first item equals ``first``."""
        for other, second in self._pairs:
            if other == first:
                return second
        raise NoValueError(first)

    def __getitem__(self, key):
        """Look ``key`` up among the first items, then among the second items."""
        try:
            return self.second_for(key)
        except NoValueError:
            return self.first_for(key)

    def append(self, pair):
        """Add one pair and return the map for chaining."""
        self._pairs.append(self._as_pair(pair))
        return self

    def extend(self, pairs):
        """Add every pair from ``pairs`` and return the map for chaining."""
        self._pairs.extend(self._as_pair(pair) for pair in pairs)
        return self

    def __iter__(self):
        return iter(list(self._pairs))

    def __len__(self):
        return len(self._pairs)

    def __repr__(self):
        return f"{type(self).__name__}({self._pairs!r})"