from fastapi import status


class CartServiceError(Exception):
    """Base error raised by the cart service. Carries the HTTP status it maps to."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class NotFoundError(CartServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidRequestError(CartServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(CartServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
