from fastapi import status


class VehicleServiceError(ValueError):
    """Base error for rejected vehicle operations.

    The message is safe to show to the caller; ``status_code`` is the HTTP
    status the API layer responds with.
    """
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(VehicleServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(VehicleServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(VehicleServiceError):
    status_code = status.HTTP_409_CONFLICT


class InvalidArgumentError(VehicleServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
