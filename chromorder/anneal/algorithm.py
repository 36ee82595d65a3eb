"""The main annealing algorithm loop."""

import math
import logging

# This is renamed to ensure that all function correctly use the random number
# generator passed into them.
import random as default_random

from collections import namedtuple

from chromorder.exceptions import InvalidConfigurationError

from chromorder.selection import Nothing

from chromorder.anneal.mutate import flippable_positions, mutate

from chromorder.anneal.result import ResultTracker

from chromorder.anneal.numpy_kernel import NumpyKernel as default_kernel


"""
This logger is used by the annealing algorithm to indicate progress.
"""
logger = logging.getLogger(__name__)


class AnnealResult(namedtuple("AnnealResult",
                              "initial_order initial_score order score "
                              "improvement")):
    """The outcome of an annealing run.

    Parameters
    ----------
    initial_order : [chromosome, ...]
    initial_score : int
    order : [chromosome, ...]
        The best order found.
    score : int
        The score of the best order found.
    improvement : float
        The change from the initial to the best score as a percentage of the
        initial score (0.0 if the initial score was zero).
    """


def num_flips(iteration, iterations, max_flips):
    """The number of swaps made to produce the candidate of an iteration.

    The flip count falls as a staircase from ``max_flips`` at the start of the
    run to a single swap for the final ``iterations / max_flips``
    iterations.

    Parameters
    ----------
    iteration : int
        The (1-based) iteration number.
    iterations : int
    max_flips : int
    """
    # 1 + floor((N - t) / (N / max_flips)), in exact integer arithmetic
    return 1 + ((iterations - iteration) * max_flips) // iterations


def temperature(iteration, iterations, temp0):
    """The annealing temperature of an iteration.

    Falls linearly from ``temp0`` on the first iteration to
    ``temp0 / iterations`` on the last.
    """
    return temp0 * (iterations - iteration + 1) / float(iterations)


def percent_change(score, initial_score):
    """The change from initial_score to score, as a percentage."""
    if initial_score == 0:
        return 0.0
    return 100.0 * (score - initial_score) / float(initial_score)


def _accept(score, current_score, initial_score, temp, config, random):
    """Decide whether to keep a candidate.

    Changes are measured relative to the initial score. Candidates which
    improve on the current score are always kept, others are kept with
    probability ``exp(-|delta| / temperature)``. When the initial score is
    zero no relative change can be computed: the relative change is taken to
    be 1 and the candidate is always subject to the probabilistic test.
    """
    if initial_score == 0:
        delta = 1.0
    else:
        delta = (score - current_score) / float(initial_score)
        if config.is_improvement(delta):
            return True

    return random.random() < math.exp(-abs(delta) / temp)


def anneal(order, links, config, static=Nothing, random=default_random,
           kernel=default_kernel, kernel_kwargs={}, on_iteration=None):
    """Reorder chromosomes using simulated annealing to minimise (or maximise)
    the number of crossing links.

    The anneal runs for exactly ``config.iterations`` iterations. In each
    iteration a candidate is produced by making
    :py:func:`.num_flips` random swaps to the current order and scoring it
    with the kernel. The candidate is accepted according to the rule in
    :py:func:`._accept` at the current :py:func:`.temperature`. The best
    accepted order is returned.

    This algorithm produces INFO level logging information describing the
    progress made by the algorithm and DEBUG level logging for every
    iteration.

    Parameters
    ----------
    order : [chromosome, ...]
        The initial order.
    links : :py:class:`~chromorder.links.LinkIndex`
    config : :py:class:`~chromorder.config.AnnealConfig`
    static : selector
        Selects chromosomes whose positions must not change.
    random : :py:class:`random.Random`
        A Python random number generator. Defaults to ``import random`` but can
        be set to your own instance of :py:class:`random.Random` to allow you
        to control the seed and produce deterministic results.
    kernel : :py:class:`~chromorder.anneal.kernel.Kernel`
        The scoring kernel to use.
    kernel_kwargs : dict
        Optional kernel-specific keyword arguments to pass to the kernel
        constructor.
    on_iteration : callback_function or None
        An (optional) callback function called after every iteration with the
        arguments ``iteration`` (int), ``accepted`` (bool), ``nflips``
        (int), ``temperature`` (float), ``score`` (the current score) and
        ``best_score``. Its return value is ignored.

    Returns
    -------
    :py:class:`.AnnealResult`

    Raises
    ------
    :py:exc:`~chromorder.exceptions.InvalidConfigurationError`
        If fewer than two positions may be swapped, or if the flip schedule
        requires more swaps than there are flippable positions.
    """
    order = list(order)

    # Special case: nothing to reorder
    if len(order) < 2:
        logger.info("Order has trivial solution. SA not used.")
        return AnnealResult(order, 0, list(order), 0, 0.0)

    flippable = flippable_positions(order, static)
    most_flips = num_flips(1, config.iterations, config.max_flips)
    if len(flippable) < 2:
        raise InvalidConfigurationError(
            "At least two chromosomes must be movable, {} of {} are "
            "static.".format(len(order) - len(flippable), len(order)))
    if most_flips > len(flippable):
        raise InvalidConfigurationError(
            "max_flips requires up to {} swaps per iteration but only {} "
            "positions are flippable.".format(most_flips, len(flippable)))

    k = kernel(links, **kernel_kwargs)
    logger.info("Crossing score kernel: %s", kernel.__name__)

    initial_score = k.score(order)
    tracker = ResultTracker(order, initial_score, config)
    logger.info("Initial score: %s", initial_score)

    iterations = config.iterations
    for iteration in range(1, iterations + 1):
        nflips = num_flips(iteration, iterations, config.max_flips)
        temp = temperature(iteration, iterations, config.temp0)

        candidate = mutate(tracker.order, flippable, nflips, random)
        score = k.score(candidate)

        accepted = _accept(score, tracker.score, initial_score, temp,
                           config, random)
        if accepted:
            tracker.accept(candidate, score)

        logger.debug("Iteration: %d, "
                     "%s, "
                     "Flips: %d, "
                     "Temp: %0.6f, "
                     "Score: %s, "
                     "Best: %s.",
                     iteration, "accept" if accepted else "reject",
                     nflips, temp, tracker.score, tracker.best_score)

        if on_iteration is not None:
            on_iteration(iteration, accepted, nflips, temp,
                         tracker.score, tracker.best_score)

    improvement = percent_change(tracker.best_score, initial_score)
    logger.info("Anneal terminated after %d iterations. "
                "Score %s -> %s (%0.1f%%).",
                iterations, initial_score, tracker.best_score, improvement)

    return AnnealResult(order, initial_score,
                        tracker.best_order, tracker.best_score, improvement)
