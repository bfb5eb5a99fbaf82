"""Exception hierarchy for frugal-id."""


class FrugalIdError(Exception):
    """Package base exception."""


class InvalidLengthError(FrugalIdError, ValueError):
    """Requested random ID length is missing or below 1."""

    def __init__(self, message: str = "Invalid UUID Length Provided"):
        super().__init__(message)
