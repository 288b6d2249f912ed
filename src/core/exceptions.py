"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    SESSION_REQUIRED = "SESSION_REQUIRED"

    # Identity provider rejected the request (400)
    SIGN_IN_FAILED = "SIGN_IN_FAILED"
    SIGN_UP_FAILED = "SIGN_UP_FAILED"

    # Not found errors (404)
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_COLLECTION = "INVALID_COLLECTION"

    # Mutation errors (502)
    MUTATION_FAILED = "MUTATION_FAILED"
    ORDER_NOT_CREATED = "ORDER_NOT_CREATED"
    ORDER_ITEM_NOT_CREATED = "ORDER_ITEM_NOT_CREATED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server / collaborator errors (500, 502)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    AUTH_PROVIDER_ERROR = "AUTH_PROVIDER_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class SessionError(AppException):
    """The identity provider rejected a sign-in or sign-up."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.SIGN_IN_FAILED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
        )


class AuthProviderError(AppException):
    """The identity provider could not be reached or answered garbage."""

    def __init__(self, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.AUTH_PROVIDER_ERROR,
            message=message,
            status_code=502,
        )


class DataGatewayError(AppException):
    """A read or write against the data service failed."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message=message,
            status_code=502,
            details={"operation": operation} if operation else None,
        )


class RecordNotFoundError(AppException):
    """An update or delete matched no row."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.RECORD_NOT_FOUND,
            message=f"No {collection} record with id {record_id}",
            status_code=404,
            details={"collection": collection, "id": record_id},
        )


class StorageError(AppException):
    """Blob storage upload failed."""

    def __init__(self, message: str, bucket: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_ERROR,
            message=message,
            status_code=502,
            details={"bucket": bucket} if bucket else None,
        )


class InvalidCollectionError(AppException):
    """Unknown snapshot collection name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_COLLECTION,
            message=f"Unknown collection: {name}",
            status_code=400,
            details={"collection": name},
        )


class MutationFailedError(AppException):
    """A mutation handler reported failure; the open form was preserved."""

    def __init__(
        self,
        message: str,
        status_code: int = 502,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=ErrorCode.MUTATION_FAILED,
            message=message,
            status_code=status_code,
            details=details,
        )


class OrderCompositionError(AppException):
    """Order submission failed in phase 1 (no order) or phase 2 (orphan order)."""

    def __init__(
        self,
        message: str,
        parent_created: bool,
        order_id: str | None = None,
    ) -> None:
        super().__init__(
            error_code=(
                ErrorCode.ORDER_ITEM_NOT_CREATED
                if parent_created
                else ErrorCode.ORDER_NOT_CREATED
            ),
            message=message,
            status_code=502,
            details={
                "parent_created": parent_created,
                "item_created": False,
                "order_id": order_id,
            },
        )
