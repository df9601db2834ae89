from fastapi import status


class AirlineOpsError(Exception):
    """Base class for business rule failures reported back to the client."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AirlineOpsError):
    """A required field is missing or malformed."""


class NotFoundError(AirlineOpsError):
    """A referenced flight or booking does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AirlineOpsError):
    """A uniqueness rule would be broken: duplicate flight slot or duplicate person on a flight."""


class CapacityError(AirlineOpsError):
    """The flight's aircraft has no free seat left."""
