"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for credit system errors.

    ``code`` is a stable machine-readable identifier surfaced in API
    error bodies and in the domain error metric; ``message`` is meant
    for humans.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
