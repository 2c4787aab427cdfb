"""Exception-to-response mapping for the Storefront API.

Protean's own handlers are registered first; the storefront handlers below
replace them for the errors whose status or body shape differs. Every error
body is `{"message": ..., "error": ...}` with `error` optional.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers as register_protean_handlers
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.errors import EmptyCartError, ProductNotFoundError

logger = structlog.get_logger(__name__)


def _body(message, error=None):
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return body


async def _product_not_found(request: Request, exc: ProductNotFoundError):
    return JSONResponse(status_code=404, content=_body(exc.message, {"productIds": exc.product_ids}))


async def _not_found(request: Request, exc: ObjectNotFoundError):
    return JSONResponse(status_code=404, content=_body(getattr(exc, "message", None) or "Not found"))


async def _empty_cart(request: Request, exc: EmptyCartError):
    return JSONResponse(status_code=400, content=_body(exc.message))


async def _domain_validation(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content=_body("Validation failed", exc.messages))


async def _request_validation(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=422, content=_body("Invalid request", errors))


async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=_body(str(exc.detail)), headers=exc.headers)


async def _server_error(request: Request, exc: Exception):
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(status_code=500, content=_body("Server error", str(exc)))


def register_exception_handlers(app: FastAPI) -> None:
    register_protean_handlers(app)

    app.add_exception_handler(ProductNotFoundError, _product_not_found)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(EmptyCartError, _empty_cart)
    app.add_exception_handler(ValidationError, _domain_validation)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _server_error)
