"""
Centralized error handlers for FastAPI.

Maps beacon domain errors to HTTP responses:

- InvalidAlleleRequestError -> 400, the request echoed back in an
  allele response with the error attached.
- any other BeaconDomainError -> 500, error body only.

No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.beacon.entities import AlleleError
from app.domain.beacon.errors import BeaconDomainError, InvalidAlleleRequestError
from app.interfaces.beacon.schemas import (
    AlleleRequestSchema,
    AlleleResponseSchema,
    BeaconErrorSchema,
)
from app.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def _json(status_code: int, body: BeaconErrorSchema | AlleleResponseSchema) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json", by_alias=True)
    )


def build_error_response(error: BeaconDomainError) -> JSONResponse:
    """Translate a beacon domain error into its HTTP response.

    Args:
        error: The raised domain error.

    Returns:
        A 400 allele response for invalid requests, a 500 error body otherwise.
    """
    match error:
        case InvalidAlleleRequestError(request=request, message=message):
            body = AlleleResponseSchema(
                allele_request=AlleleRequestSchema.from_entity(request),
                exists=None,
                error=BeaconErrorSchema.from_entity(AlleleError(HTTP_400, message)),
            )
            return _json(HTTP_400, body)
        case BeaconDomainError(message=message):
            return _json(
                HTTP_500, BeaconErrorSchema.from_entity(AlleleError(HTTP_500, message))
            )


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BeaconDomainError)
    async def handle_beacon_domain(
        _request: Request, exc: BeaconDomainError
    ) -> JSONResponse:
        """Translate beacon domain errors."""
        response = build_error_response(exc)
        if response.status_code == HTTP_400:
            logger.warning("Invalid allele request: %s", exc.message)
        else:
            logger.error("Unhandled beacon domain error: %s", exc.message)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals.

        Starlette runs this handler outside the user middleware stack,
        so the security headers are set here.
        """
        logger.exception("Unexpected error: %s", type(exc).__name__)
        response = _json(
            HTTP_500,
            BeaconErrorSchema(error_code=HTTP_500, message="Internal server error"),
        )
        response.headers.update(SECURE_HEADERS)
        return response
