"""Translate failed console results into API errors."""

from core.exceptions import ErrorCode, MutationFailedError, OrderCompositionError
from domain.entities.outcomes import MutationResult, OrderComposition

_STATUS_BY_CODE = {
    ErrorCode.RECORD_NOT_FOUND.value: 404,
    ErrorCode.VALIDATION_ERROR.value: 400,
}


def ensure_succeeded(result: MutationResult) -> MutationResult:
    """Raise MutationFailedError for a failed handler result."""
    if not result.ok:
        raise MutationFailedError(
            message=result.error or "Mutation failed",
            status_code=_STATUS_BY_CODE.get(result.error_code or "", 502),
            details={
                "cause": result.error_code,
                "record_id": str(result.record_id) if result.record_id else None,
            },
        )
    return result


def ensure_composed(composition: OrderComposition) -> OrderComposition:
    """Raise OrderCompositionError unless both phases succeeded."""
    if not composition.ok:
        raise OrderCompositionError(
            message=composition.error or "Order submission failed",
            parent_created=composition.parent_created,
            order_id=str(composition.order_id) if composition.order_id else None,
        )
    return composition
