"""Parameters controlling an annealing run."""

import math

from collections import namedtuple

from enum import Enum

from chromorder.exceptions import InvalidConfigurationError


class Optimize(Enum):
    """The direction in which the crossing score is driven."""

    minimize = "minimize"
    maximize = "maximize"

    @classmethod
    def parse(cls, value):
        """Get the :py:class:`.Optimize` named by a string (or return the
        value unchanged if it is already an :py:class:`.Optimize`).

        Raises
        ------
        :py:exc:`~chromorder.exceptions.InvalidConfigurationError`
            If the value does not name a direction.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidConfigurationError(
                "optimize must be one of {}, not {!r}".format(
                    ", ".join(d.value for d in cls), value))


class AnnealConfig(namedtuple("AnnealConfig",
                              "iterations max_flips temp0 optimize")):
    """Immutable, validated parameters of a single annealing run.

    Parameters
    ----------
    iterations : int
        The number of candidate orders to evaluate (N). Must be positive.
    max_flips : int
        The number of steps in the flip-count staircase: early iterations make
        up to this many swaps per candidate, the last iterations make one.
    temp0 : float
        The initial temperature. The temperature falls linearly from ``temp0``
        to ``temp0 / iterations``.
    optimize : :py:class:`.Optimize` or str
        Whether a lower (``minimize``) or higher (``maximize``) score is
        better.

    Raises
    ------
    :py:exc:`~chromorder.exceptions.InvalidConfigurationError`
        If any parameter is out of range.
    """

    def __new__(cls, iterations=1000, max_flips=5, temp0=0.01,
                optimize=Optimize.minimize):
        iterations = _positive_int("iterations", iterations)
        max_flips = _positive_int("max_flips", max_flips)

        try:
            temp0 = float(temp0)
        except (TypeError, ValueError):
            raise InvalidConfigurationError(
                "temp0 must be a number, not {!r}".format(temp0))
        if not (temp0 > 0.0 and math.isfinite(temp0)):
            raise InvalidConfigurationError(
                "temp0 must be positive and finite, not {}".format(temp0))

        return super(AnnealConfig, cls).__new__(
            cls, iterations, max_flips, temp0, Optimize.parse(optimize))

    def is_better(self, score, other):
        """Is ``score`` strictly better than ``other``?"""
        if self.optimize is Optimize.minimize:
            return score < other
        else:
            return score > other

    def is_improvement(self, relative_delta):
        """Does the given relative score change move in the optimisation
        direction?
        """
        if self.optimize is Optimize.minimize:
            return relative_delta < 0
        else:
            return relative_delta > 0


def _positive_int(name, value):
    try:
        as_int = int(value)
    except (TypeError, ValueError):
        as_int = None
    if (isinstance(value, bool) or as_int is None or
            as_int != value or as_int < 1):
        raise InvalidConfigurationError(
            "{} must be a positive integer, not {!r}".format(name, value))
    return as_int
