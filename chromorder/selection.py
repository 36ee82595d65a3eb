"""Selection of the chromosomes which may be moved (the shuffle set) and of
those whose positions are fixed (the static set).

A selector is either one of the :py:data:`.Everything` or
:py:data:`.Nothing` sentinels or any callable ``f(chromosome) -> bool``.
"""

import re

import sentinel


Everything = sentinel.create("Everything")
"""Selects every chromosome."""

Nothing = sentinel.create("Nothing")
"""Selects no chromosomes."""


def pattern_selector(patterns):
    """Select chromosomes whose name matches any of a list of regular
    expressions.

    Parameters
    ----------
    patterns : str or [str, ...]
        Regular expressions searched for anywhere in the chromosome name.
    """
    if isinstance(patterns, str):
        patterns = [patterns]
    compiled = [re.compile(p) for p in patterns]

    def selector(chromosome):
        return any(p.search(chromosome) for p in compiled)
    return selector


def set_selector(chromosomes):
    """Select chromosomes which are members of the supplied collection."""
    members = frozenset(chromosomes)

    def selector(chromosome):
        return chromosome in members
    return selector


def matches(selector, chromosome):
    """Does the selector select the given chromosome?"""
    if selector is Everything:
        return True
    elif selector is Nothing:
        return False
    else:
        return bool(selector(chromosome))


def select(chromosomes, selector):
    """Filter a sequence of chromosomes, preserving its order."""
    return [c for c in chromosomes if matches(selector, c)]


def read_order_file(lines):
    """Generate the chromosome names listed one-per-line in an order file.

    Blank lines and ``#`` comments are skipped. Only the first token on each
    line is used.
    """
    for line in lines:
        line = line.split("#", 1)[0].strip()
        if line:
            yield line.split()[0]
