"""A Python implementation of the crossing-score kernel."""

from chromorder.anneal.kernel import Kernel


class PythonKernel(Kernel):
    """A direct implementation of the crossing score written in pure Python.

    The score of an order is accumulated over every pair of non-adjacent
    positions ``(i, j)`` (with ``j >= i + 2``) whose chromosomes are linked.
    The pair splits the remaining chromosomes into two groups: those strictly
    between ``i`` and ``j`` (``group1``) and all others (``group2``, in the
    order ``j+1 .. n-1, 0 .. i-1``). Each such pair contributes:

    * the number of links between ``ci`` and ``cj`` multiplied by the number
      of links between ``group1`` and ``group2``, and
    * the number of crossings between the links leaving ``ci`` (and ``cj``)
      towards each group, see :py:func:`.local_crossings`.

    This implementation makes no attempt to be fast and serves as the
    reference against which other kernels are checked.
    """

    def __init__(self, links):
        self.links = links

    def score(self, order):
        links = self.links
        order = list(order)
        n = len(order)

        score = 0
        for i in range(n):
            ci = order[i]
            for j in range(i + 2, n):
                cj = order[j]
                nlinks = links.pair_count(ci, cj)
                if nlinks == 0:
                    continue

                group1 = order[i + 1:j]
                group2 = order[j + 1:] + order[:i]

                score += nlinks * _between_links(links, group1, group2)
                score += pair_local_crossings(links, ci, cj, group1, group2)

        return score


def _between_links(links, group1, group2):
    """Count the links with one end in each group."""
    return sum(links.pair_count(c, d) for c in group1 for d in group2)


def pair_local_crossings(links, ci, cj, group1, group2):
    """The local crossings contributed by the position pair (ci, cj)."""
    return (local_crossings(links, ci, group2, True) +
            local_crossings(links, ci, group1, False) +
            local_crossings(links, cj, group1, True) +
            local_crossings(links, cj, group2, False))


def local_crossings(links, chromosome, group, forward):
    """Count the crossings amongst the links from one chromosome to a group of
    other chromosomes.

    Parameters
    ----------
    links : :py:class:`~chromorder.links.LinkIndex`
    chromosome
        The chromosome whose links are considered.
    group : [chromosome, ...]
        The partner chromosomes, in order. A partner's index in this list is
        its rank.
    forward : bool
        If True, the links are visited in descending order of their position
        on ``chromosome``, otherwise in ascending order.

    Returns
    -------
    int
        The number of pairs of links ``(li, lj)``, with ``li`` visited before
        ``lj``, for which the partner of ``lj`` does not rank after the
        partner of ``li``. When both links go to the same partner the pair
        does not cross if ``lj`` lands before ``li`` (forward) or after it
        (backward).
    """
    endpoints = []
    for rank, partner in enumerate(group):
        for endpoint in links.positions(chromosome, partner):
            endpoints.append((endpoint, rank))
    if len(endpoints) < 2:
        return 0

    # Ties are ordered by the far end and partner so that the backward visit
    # order is exactly the reverse of the forward one.
    endpoints.sort(key=lambda e: (e[0].p1, e[0].p2, e[0].partner),
                   reverse=forward)

    crossings = 0
    for a, (li, rank_i) in enumerate(endpoints):
        for lj, rank_j in endpoints[a + 1:]:
            if rank_j > rank_i:
                continue
            elif rank_j == rank_i:
                if forward and lj.p2 < li.p2:
                    continue
                elif not forward and lj.p2 > li.p2:
                    continue
            crossings += 1
    return crossings
