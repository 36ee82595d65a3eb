"""Tracking of the current and best solutions found during an anneal."""


class ResultTracker(object):
    """Holds the current order and the best order seen so far.

    Attributes
    ----------
    order, score
        The current (most recently accepted) order and its score.
    best_order, best_score
        The best order accepted so far and its score. These are only replaced
        by a strictly better accepted order.
    """

    def __init__(self, order, score, config):
        """
        Parameters
        ----------
        order : [chromosome, ...]
            The initial order.
        score
            The score of the initial order.
        config : :py:class:`~chromorder.config.AnnealConfig`
            Defines which of two scores is better.
        """
        self.config = config
        self.order = list(order)
        self.score = score
        self.best_order = list(order)
        self.best_score = score

    def accept(self, order, score):
        """Make the supplied order current.

        Returns
        -------
        bool
            True if the order is also the new best.
        """
        self.order = order
        self.score = score
        if self.config.is_better(score, self.best_score):
            self.best_order = list(order)
            self.best_score = score
            return True
        else:
            return False
