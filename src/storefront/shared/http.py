"""HTTP glue shared by every router: caller identity and error responses.

Authentication happens upstream. The gateway forwards the authenticated user
in `X-User-Id` and their role in `X-User-Role`.
"""

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.shared.errors import (
    Conflict,
    Forbidden,
    InsufficientInventory,
    InvalidState,
    NotFound,
    StorefrontError,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ADMIN_ROLE = "admin"

_STATUS_CODES = {
    NotFound: 404,
    Forbidden: 403,
    InvalidState: 400,
    InsufficientInventory: 400,
    Conflict: 409,
}


def current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Unauthenticated")
    return x_user_id


def require_admin(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> str:
    user_id = current_user_id(x_user_id)
    if (x_user_role or "").lower() != ADMIN_ROLE:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user_id


def status_code_for(exc: StorefrontError) -> int:
    for error_cls in type(exc).__mro__:
        if error_cls in _STATUS_CODES:
            return _STATUS_CODES[error_cls]
    return 400


def register_error_handlers(app: FastAPI) -> None:
    """Translate domain, Protean and request-parsing exceptions into JSON error responses.

    Protean's own handlers cover `ValidationError` (400) and
    `ObjectNotFoundError` (404).
    """
    register_exception_handlers(app)

    @app.exception_handler(StorefrontError)
    async def storefront_error(request: Request, exc: StorefrontError):
        status_code = status_code_for(exc)
        logger.info("request_rejected", path=request.url.path, error=exc.category, status_code=status_code)
        return JSONResponse(status_code=status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "message": "Validation failed",
                "error": "validation",
                "errors": jsonable_encoder(exc.errors()),
            },
        )
