"""
Conference Central - Exceptions
"""


class ConferenceCentralError(Exception):
    """Base exception for conference central errors"""
    pass


class UnauthenticatedError(ConferenceCentralError):
    """Raised when an operation needs a signed-in caller and none is present"""

    def __init__(self, message: str = "Authorization required"):
        super().__init__(message)


class ConferenceNotFoundError(ConferenceCentralError):
    """Raised when a conference is not found"""
    pass


class InvalidConferenceKeyError(ConferenceCentralError):
    """Raised when a websafe conference key cannot be parsed"""
    pass
