"""Simulated-annealing based reordering of chromosomes to reduce (or increase)
the number of crossing links in circular genome layouts.
"""

from chromorder.version import __version__
