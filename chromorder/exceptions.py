"""Exceptions which indicate standard types of problem with a reordering run.
"""


class ChromorderError(Exception):
    """Base class for all errors raised by chromorder."""
    pass


class InvalidConfigurationError(ChromorderError):
    """Indication that a run cannot proceed because an invalid or impossible
    set of parameters was given.
    """
    pass


class LinkFormatError(ChromorderError):
    """Indication that a link file line could not be interpreted.

    Attributes
    ----------
    line_number : int
        The (1-based) number of the offending line.
    """

    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = "line {}: {}".format(line_number, message)
        super(LinkFormatError, self).__init__(message)
        self.line_number = line_number
