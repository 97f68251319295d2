from math import comb


class SubsetEnumerator:
    """
    Enumerates all subsets of size k of range(start, n) in lexicographic order.

    The current subset is kept as a sorted list of indices. advance() reports
    the first position that changed, so callers building state per position
    (e.g. matrix rows) can keep everything before it.

        enum = SubsetEnumerator(2, 4)
        while enum.is_valid():
            use(enum.subset)
            enum.advance()

    Iterating the object restarts it and yields each subset as a tuple.
    """
    def __init__(self, k: int, n: int, start: int = 0):
        if k < 0:
            raise ValueError(f"Subset size must be >= 0, got {k}")
        if n < start:
            raise ValueError(f"Empty range [{start}, {n})")
        self.k = k
        self.n = n
        self.start = start
        self.ids = []
        self.valid = False
        self.reset()

    def reset(self):
        self.ids = list(range(self.start, self.start + self.k))
        self.valid = self.k <= self.n - self.start

    def is_valid(self):
        return self.valid

    def advance(self):
        """
        Moves to the next subset. Returns the position of the first index
        that changed, or 0 when the enumeration is exhausted.
        """
        i = self.k - 1
        # find the rightmost index that is not yet at its maximum
        while i >= 0 and self.ids[i] == self.n - self.k + i:
            i -= 1
        if i < 0:
            self.valid = False
            return 0
        self.ids[i] += 1
        for j in range(i + 1, self.k):
            self.ids[j] = self.ids[j - 1] + 1
        return i

    def count(self):
        return comb(self.n - self.start, self.k)

    @property
    def subset(self):
        return tuple(self.ids)

    def __getitem__(self, i):
        return self.ids[i]

    def __len__(self):
        return self.k

    def __iter__(self):
        self.reset()
        while self.valid:
            yield tuple(self.ids)
            self.advance()
