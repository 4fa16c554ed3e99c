"""Storefront FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context, get_logger

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay:
#   - unset        → in-memory provider
#   - "production" → PostgreSQL provider
storefront.init()

logger = get_logger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="E-commerce storefront: catalogue, cart, checkout, orders and wishlists",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and bind request details to the log context."""
        clear_context()
        add_context(
            request_id=request.headers.get("x-request-id") or str(uuid.uuid4()),
            method=request.method,
            path=request.url.path,
        )
        user_id = request.headers.get("x-user-id")
        if user_id:
            add_context(user_id=user_id)

        try:
            with storefront.domain_context():
                response = await call_next(request)
            logger.debug("request_completed", status_code=response.status_code)
            return response
        finally:
            clear_context()

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    from storefront.api import (
        admin_router,
        cart_router,
        category_router,
        checkout_router,
        order_router,
        product_router,
        wishlist_router,
    )
    from storefront.shared.http import register_error_handlers

    register_error_handlers(app)

    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(order_router)
    app.include_router(wishlist_router)
    app.include_router(admin_router)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": {"name": storefront.name}})

    return app


app = create_app()
