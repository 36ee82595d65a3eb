"""Simulated-annealing based chromosome reordering.

The annealing algorithm is broken into two components: the high-level algorithm
implementation :py:func:`~chromorder.anneal.anneal` and a crossing-score
:py:class:`~chromorder.anneal.kernel.Kernel`.

The algorithm takes care of the flip and temperature schedules, generating
candidate orders, the acceptance rule and tracking the best order found.

The kernel is responsible for scoring orders. Since this is the most
performance-sensitive part of the algorithm, its implementation may be swapped
for more efficient implementations as required. A portable, but slow,
reference kernel written in Python is included in
:py:class:`~chromorder.anneal.python_kernel.PythonKernel` and the default
:py:class:`~chromorder.anneal.numpy_kernel.NumpyKernel` produces identical
scores.
"""

from chromorder.anneal.algorithm import anneal, AnnealResult
