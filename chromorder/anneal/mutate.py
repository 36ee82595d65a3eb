"""Generation of neighbouring candidate orders."""

from chromorder.exceptions import InvalidConfigurationError

from chromorder.selection import Nothing, matches


def flippable_positions(order, static=Nothing):
    """Get the positions in an order which may be swapped.

    Parameters
    ----------
    order : [chromosome, ...]
    static : selector
        Selects the chromosomes whose positions must not change (see
        :py:mod:`chromorder.selection`).

    Returns
    -------
    [int, ...]
    """
    return [i for i, c in enumerate(order) if not matches(static, c)]


def mutate(order, flippable, nflips, random):
    """Produce a new order by making a number of random swaps.

    Each swap exchanges the chromosomes at two distinct positions chosen
    uniformly at random from ``flippable``. Swaps are applied one after
    another so later swaps may undo or extend earlier ones.

    Parameters
    ----------
    order : [chromosome, ...]
        The order to start from. This is not modified.
    flippable : [int, ...]
        The positions which may be swapped.
    nflips : int
        The number of swaps to make.
    random : :py:class:`random.Random`
        The random number generator to use.

    Returns
    -------
    [chromosome, ...]

    Raises
    ------
    :py:exc:`~chromorder.exceptions.InvalidConfigurationError`
        If swaps are requested but fewer than two positions are flippable.
    """
    new_order = list(order)
    if nflips >= 1 and len(flippable) < 2:
        raise InvalidConfigurationError(
            "Cannot swap chromosomes: {} flippable position(s)".format(
                len(flippable)))

    for _ in range(nflips):
        a = random.choice(flippable)
        b = a
        while b == a:
            b = random.choice(flippable)
        new_order[a], new_order[b] = new_order[b], new_order[a]

    return new_order
