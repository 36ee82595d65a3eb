# pragma: no cover

"""General interface for a crossing-score kernel."""


class Kernel(object):
    """A general API for a kernel which scores chromosome orders."""

    def __init__(self, links, **kwargs):
        """Initialise the kernel with the links to be scored.

        Parameters
        ----------
        links : :py:class:`~chromorder.links.LinkIndex`
            The link statistics. This object must not be modified while the
            kernel is in use.
        """
        raise NotImplementedError()

    def score(self, order):
        """Compute the weighted crossing score of an order.

        Scores must be deterministic and depend only on the links and the
        supplied order: every kernel must return exactly the same value as
        :py:class:`~chromorder.anneal.python_kernel.PythonKernel`.

        Parameters
        ----------
        order : [chromosome, ...]
            The chromosomes in their (circular) order.

        Returns
        -------
        int
        """
        raise NotImplementedError()
