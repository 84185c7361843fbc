"""Exceptions raised by the service layer."""


class InvalidInputError(ValueError):
    """The request payload is missing something the operation needs.

    The message is suitable for returning to the client unchanged.
    """
