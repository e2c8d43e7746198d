"""
Exception handlers for the board game API.
"""
import logging
from fastapi import Request, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import (
    GameException, SessionNotFound, InvalidMove, InvalidSize,
    NoLegalMoves, NotYourTurn, GameEnded, InvalidRequest, SessionLimitReached
)

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, detail: str, error_code: str, request: Request) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": detail,
            "error_code": error_code,
            "request_id": getattr(request.state, 'request_id', None)
        }
    )


async def session_not_found_handler(request: Request, exc: SessionNotFound) -> JSONResponse:
    """Handle game not found exceptions."""
    return create_error_response(404, str(exc), "GAME_NOT_FOUND", request)


async def invalid_move_handler(request: Request, exc: InvalidMove) -> JSONResponse:
    """Handle off-board or occupied cell moves; the client should ask again."""
    return create_error_response(400, str(exc), "INVALID_MOVE", request)


async def invalid_size_handler(request: Request, exc: InvalidSize) -> JSONResponse:
    """Handle unsupported board sizes."""
    return create_error_response(400, str(exc), "INVALID_SIZE", request)


async def not_your_turn_handler(request: Request, exc: NotYourTurn) -> JSONResponse:
    """Handle not your turn exceptions."""
    return create_error_response(400, str(exc), "NOT_YOUR_TURN", request)


async def game_ended_handler(request: Request, exc: GameEnded) -> JSONResponse:
    """Handle game ended exceptions."""
    return create_error_response(400, str(exc), "GAME_ENDED", request)


async def no_legal_moves_handler(request: Request, exc: NoLegalMoves) -> JSONResponse:
    """A selector ran on a full board: a turn sequencing bug, not a client error."""
    logger.error(f"Move selector called without legal moves: {exc}", exc_info=True)
    return create_error_response(500, str(exc), "NO_LEGAL_MOVES", request)


async def game_exception_handler(request: Request, exc: GameException) -> JSONResponse:
    """Handle generic game exceptions."""
    return create_error_response(400, str(exc), "GAME_ERROR", request)


async def invalid_request_handler(request: Request, exc: InvalidRequest) -> JSONResponse:
    """Handle arguments rejected by the services."""
    return create_error_response(400, str(exc), "INVALID_REQUEST", request)


async def session_limit_handler(request: Request, exc: SessionLimitReached) -> JSONResponse:
    """Handle a registry with no finished games left to drop."""
    logger.warning(f"Session limit reached: {exc}")
    return create_error_response(503, str(exc), "TOO_MANY_GAMES", request)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle validation errors with better formatting."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": ".".join(str(x) for x in error["loc"][1:]),
            "message": error["msg"],
            "type": error["type"]
        })

    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "errors": errors,
            "error_code": "VALIDATION_ERROR",
            "request_id": getattr(request.state, 'request_id', None)
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle generic HTTP exceptions."""
    return create_error_response(exc.status_code, exc.detail, f"HTTP_{exc.status_code}", request)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {exc}", exc_info=True)

    # Don't expose internal errors in production
    if settings.DEBUG:
        detail = str(exc)
    else:
        detail = "An unexpected error occurred"

    return create_error_response(500, detail, "INTERNAL_ERROR", request)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(SessionNotFound, session_not_found_handler)
    app.add_exception_handler(InvalidMove, invalid_move_handler)
    app.add_exception_handler(InvalidSize, invalid_size_handler)
    app.add_exception_handler(NotYourTurn, not_your_turn_handler)
    app.add_exception_handler(GameEnded, game_ended_handler)
    app.add_exception_handler(NoLegalMoves, no_legal_moves_handler)
    app.add_exception_handler(InvalidRequest, invalid_request_handler)
    app.add_exception_handler(SessionLimitReached, session_limit_handler)
    app.add_exception_handler(GameException, game_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
