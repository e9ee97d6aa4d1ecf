"""FastAPI application exposing the calculation core over HTTP."""
from typing import Dict, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calculator_service.common.calculator import evaluate, format_result
from calculator_service.common.errors import FailureKind
from calculator_service.common.logger import logger
from calculator_service.common.models import CalculateRequest, CalculateResponse, ErrorResponse

DEFAULT_PATH = "/api/v1/calculate"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# Mapping of failure kinds to (HTTP status, client message)
FAILURE_RESPONSES: Dict[FailureKind, Tuple[int, str]] = {
    FailureKind.INVALID_EXPRESSION: (422, "Expression is not valid"),
    FailureKind.DIVISION_BY_ZERO: (422, "Division by zero"),
    FailureKind.INTERNAL_ERROR: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """
    Build a JSON error response with the ``{"error": ...}`` envelope.

    :param int status_code: HTTP status code
    :param str message: Message placed in the error field

    :return: JSON response
    :rtype: JSONResponse
    """
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields never reach the core."""
    logger.error(f"🌐❌ Could not decode request body on {request.url.path}: {exc.errors()}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the error envelope."""
    logger.warning(f"🌐❌ {request.method} {request.url.path} rejected: {exc.status_code} {exc.detail}")
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def create_app(path: str = DEFAULT_PATH) -> FastAPI:
    """
    Create the FastAPI application with a single POST calculate route.

    :param str path: URL path of the calculate endpoint

    :return: Configured application
    :rtype: FastAPI
    """
    app = FastAPI(title="Arithmetic calculator service")
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

    # Plain def: FastAPI runs it in its threadpool, evaluation holds no shared state
    @app.post(
        path,
        response_model=CalculateResponse,
        responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def calculate(request: CalculateRequest):
        logger.info(f"🌐 Received expression: {request.expression!r}")
        outcome = evaluate(request.expression)

        if not outcome.ok:
            status_code, message = FAILURE_RESPONSES[outcome.failure]
            if outcome.failure is FailureKind.INTERNAL_ERROR:
                logger.error(f"🌐❌ Internal error while evaluating {request.expression!r}")
            return error_response(status_code, message)

        return CalculateResponse(result=format_result(outcome.result))

    return app
