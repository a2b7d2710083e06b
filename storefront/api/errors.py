# storefront/api/errors.py
from contextlib import contextmanager

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.errors import AuthenticationError, StorefrontError
from storefront.utils.logging import get_logger
from storefront.utils.settings import DEBUG

logger = get_logger(__name__)


@contextmanager
def translate_errors():
    """
    Wraps a route body: known error kinds become their status code,
    anything else is logged and answered with a bare 500.
    """
    try:
        yield
    except HTTPException:
        raise
    except StorefrontError as e:
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(e, AuthenticationError) else None
        raise HTTPException(status_code=e.status_code, detail=str(e), headers=headers) from e
    except Exception as e:
        logger.exception(f"Unhandled error: {e}")
        detail = f"Internal server error: {e}" if DEBUG else "Internal server error"
        raise HTTPException(status_code=500, detail=detail) from e


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Validation failed", "errors": jsonable_encoder(exc.errors())},
    )
