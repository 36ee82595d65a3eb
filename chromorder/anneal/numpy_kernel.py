"""A numpy-accelerated implementation of the crossing-score kernel."""

import numpy as np

from chromorder.anneal.kernel import Kernel

from chromorder.anneal.python_kernel import pair_local_crossings


class NumpyKernel(Kernel):
    """An implementation of the crossing-score kernel which uses numpy to
    evaluate the between-group link counts.

    For every order scored, a pair-count matrix is assembled in order and its
    2D prefix sums are used to count the links between ``group1`` and
    ``group2`` for all linked position pairs at once. The (sparse) local
    crossing term is evaluated exactly as in
    :py:class:`~chromorder.anneal.python_kernel.PythonKernel`. Since all
    arithmetic is carried out on integers, the scores produced are identical.
    """

    def __init__(self, links):
        self.links = links

        # Chromosome to row/column in the pair-count matrix. The final
        # row/column is all zeros and stands in for chromosomes which have no
        # links at all.
        self._index = {c: i for i, c in enumerate(links)}
        num = len(self._index)
        self._counts = np.zeros((num + 1, num + 1), dtype=np.int64)
        for c, ci in self._index.items():
            for d, count in links[c].pair_count.items():
                self._counts[ci, self._index[d]] = count

    def score(self, order):
        order = list(order)
        n = len(order)
        if n < 3:
            return 0

        missing = len(self._index)
        rows = np.array([self._index.get(c, missing) for c in order],
                        dtype=np.intp)
        counts = self._counts[np.ix_(rows, rows)]

        # prefix[r, c] is the sum of counts[:r, :c]
        prefix = np.zeros((n + 1, n + 1), dtype=np.int64)
        prefix[1:, 1:] = counts.cumsum(axis=0).cumsum(axis=1)

        def block(r0, r1, c0, c1):
            return (prefix[r1, c1] - prefix[r0, c1] -
                    prefix[r1, c0] + prefix[r0, c0])

        # All linked pairs (i, j) with j >= i + 2 in row-major order
        ii, jj = np.nonzero(np.triu(counts, 2))
        if len(ii) == 0:
            return 0

        xlinks = block(ii + 1, jj, jj + 1, n) + block(ii + 1, jj, 0, ii)
        score = int((counts[ii, jj] * xlinks).sum())

        links = self.links
        for i, j in zip(ii.tolist(), jj.tolist()):
            score += pair_local_crossings(links, order[i], order[j],
                                          order[i + 1:j],
                                          order[j + 1:] + order[:i])

        return score
