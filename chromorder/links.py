"""Aggregated link statistics used to score chromosome orders.

A link file describes each link as a pair of consecutive endpoint lines::

    segdup00001 hs1 465 30596
    segdup00001 hs2 114046768 114076456

Every link record is stored twice in a :py:class:`.LinkIndex`, once from the
point of view of each of its endpoints, so that all links leaving a given
chromosome towards a given partner can be looked up directly.
"""

import logging

from collections import namedtuple, OrderedDict

from chromorder.exceptions import LinkFormatError


"""
This logger is used to report dropped or unusual link data.
"""
logger = logging.getLogger(__name__)


class LinkEndpoint(namedtuple("LinkEndpoint", "p1 p2 partner")):
    """One directed view of a link record.

    Parameters
    ----------
    p1 : float
        The midpoint of the link on the chromosome owning this view.
    p2 : float
        The midpoint of the link on the partner chromosome.
    partner : str
        The chromosome at the far end of the link.
    """


class ChromosomeLinks(object):
    """The link statistics for a single chromosome.

    Attributes
    ----------
    pair_count : {partner: int, ...}
        The number of link records connecting this chromosome to each partner
        (including itself, for self-links).
    positions : {partner: [:py:class:`.LinkEndpoint`, ...], ...}
        The directed link endpoints from this chromosome to each partner, in
        the order they were read.
    total : int
        The number of inter-chromosome links touching this chromosome.
    in_links : int
        The number of inter-chromosome links whose second endpoint is on this
        chromosome.
    out_links : int
        The number of inter-chromosome links whose first endpoint is on this
        chromosome.
    """

    __slots__ = ["pair_count", "positions", "total", "in_links", "out_links"]

    def __init__(self):
        self.pair_count = {}
        self.positions = {}
        self.total = 0
        self.in_links = 0
        self.out_links = 0

    def _add(self, p1, p2, partner):
        self.pair_count[partner] = self.pair_count.get(partner, 0) + 1
        self.positions.setdefault(partner, []).append(
            LinkEndpoint(p1, p2, partner))


class LinkIndex(object):
    """Per-chromosome and per-chromosome-pair link statistics.

    The index is built once (see :py:meth:`.from_records`) and is not modified
    afterwards.
    """

    def __init__(self):
        self._chromosomes = OrderedDict()

    @classmethod
    def from_records(cls, records):
        """Build an index from an iterable of link records.

        Parameters
        ----------
        records : iterable
            Each record is a pair of endpoints ``((chr, start, end), (chr,
            start, end))``. The position of an endpoint is the midpoint of its
            start and end. The first endpoint is counted as the "out" side of
            the link and the second as the "in" side.
        """
        index = cls()
        for (c1, start1, end1), (c2, start2, end2) in records:
            p1 = (start1 + end1) / 2.0
            p2 = (start2 + end2) / 2.0

            links1 = index._get_or_add(c1)
            links2 = index._get_or_add(c2)

            # Self-links are counted once, but stored in both directions
            links1._add(p1, p2, c2)
            if c1 != c2:
                links2._add(p2, p1, c1)

                links1.total += 1
                links1.out_links += 1
                links2.total += 1
                links2.in_links += 1
            else:
                links1.positions[c1].append(LinkEndpoint(p2, p1, c1))

        return index

    def _get_or_add(self, chromosome):
        links = self._chromosomes.get(chromosome)
        if links is None:
            links = self._chromosomes[chromosome] = ChromosomeLinks()
        return links

    @property
    def chromosomes(self):
        """All chromosomes mentioned by the links, in order of first
        appearance.
        """
        return list(self._chromosomes)

    def pair_count(self, c, d):
        """The number of link records connecting chromosomes c and d."""
        links = self._chromosomes.get(c)
        if links is None:
            return 0
        return links.pair_count.get(d, 0)

    def positions(self, c, d):
        """The :py:class:`.LinkEndpoint` s leading from c towards d."""
        links = self._chromosomes.get(c)
        if links is None:
            return []
        return links.positions.get(d, [])

    def total(self, c):
        return self._chromosomes[c].total if c in self else 0

    def in_links(self, c):
        return self._chromosomes[c].in_links if c in self else 0

    def out_links(self, c):
        return self._chromosomes[c].out_links if c in self else 0

    def __getitem__(self, chromosome):
        return self._chromosomes[chromosome]

    def __contains__(self, chromosome):
        return chromosome in self._chromosomes

    def __iter__(self):
        return iter(self._chromosomes)

    def __len__(self):
        return len(self._chromosomes)


def read_links(lines):
    """Generate link records from the lines of a link file.

    Each non-blank, non-comment line describes one endpoint as whitespace
    separated tokens ``id chromosome start end [options]``. Consecutive
    endpoint lines are paired into a link. A trailing unpaired endpoint is
    dropped.

    Generates
    ---------
    ((chr, start, end), (chr, start, end))

    Raises
    ------
    :py:exc:`~chromorder.exceptions.LinkFormatError`
        If an endpoint line is malformed.
    """
    pending = None
    for line_number, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        fields = line.split()
        if len(fields) < 4:
            raise LinkFormatError(
                "expected 'id chromosome start end', got {!r}".format(line),
                line_number)
        try:
            endpoint = (fields[1], float(fields[2]), float(fields[3]))
        except ValueError:
            raise LinkFormatError(
                "link coordinates must be numeric, got {!r}".format(line),
                line_number)

        if pending is None:
            pending = endpoint
        else:
            yield (pending, endpoint)
            pending = None

    if pending is not None:
        logger.debug("Dropping unpaired trailing link endpoint %s:%s-%s",
                     *pending)


def load_links(filename):
    """Read a link file into a :py:class:`.LinkIndex`.

    Raises
    ------
    IOError
        If the file cannot be read.
    :py:exc:`~chromorder.exceptions.LinkFormatError`
    """
    with open(filename, "r") as f:
        index = LinkIndex.from_records(read_links(f))
    logger.info("Read links for %d chromosomes from %s",
                len(index), filename)
    return index
