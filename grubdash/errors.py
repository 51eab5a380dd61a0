"""
Errors raised by guard chains. Each carries the HTTP status and message returned to the client.
"""


class ChainError(Exception):
    """A guard short-circuited the chain."""
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(ChainError):
    """Malformed or semantically invalid request content."""
    status_code = 400


class NotFound(ChainError):
    """Referenced entity id does not exist in the store."""
    status_code = 404
