import logging
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from formapi.validation import Violation

logger = logging.getLogger(__name__)


class FormValidationError(Exception):
    def __init__(self, violations: List[Violation]):
        super().__init__(", ".join(f"{v.field}: {v.message}" for v in violations))
        self.violations = violations


class FormDataNotFound(Exception):
    """No stored record has the requested id.

    Lookups answer with a bare message; mutations also report ``success``.
    """

    message = "Form data not found"

    def __init__(self, record_id: str, with_success: bool = True):
        super().__init__(f"{self.message}: {record_id}")
        self.record_id = record_id
        self.with_success = with_success


def _validation_response(violations: List[Violation]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation failed",
            "errors": [{"field": v.field, "message": v.message} for v in violations],
        },
    )


def _violations_from_request_errors(exc: RequestValidationError) -> List[Violation]:
    violations = []
    for err in exc.errors():
        loc = [part for part in err.get("loc", ()) if part != "body"]
        # a JSON decode error is located by character offset, not by field
        if err.get("type") == "json_invalid" or not loc or not isinstance(loc[0], str):
            field = "body"
        else:
            field = loc[0]
        violations.append(Violation(field, err.get("msg", "Invalid value")))
    return violations


def register_exception_handlers(app: FastAPI, debug: bool = False) -> None:
    @app.exception_handler(FormValidationError)
    async def form_validation_handler(request: Request, exc: FormValidationError):
        logger.debug(f"Rejected {request.method} {request.url.path}: {exc}")
        return _validation_response(exc.violations)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        violations = _violations_from_request_errors(exc)
        logger.debug(f"Malformed body on {request.method} {request.url.path}: {violations}")
        return _validation_response(violations)

    @app.exception_handler(FormDataNotFound)
    async def not_found_handler(request: Request, exc: FormDataNotFound):
        logger.debug(f"{request.method} {request.url.path}: {exc}")
        content = {"message": exc.message}
        if exc.with_success:
            content = {"success": False, **content}
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=content)

    @app.exception_handler(PyMongoError)
    async def storage_error_handler(request: Request, exc: PyMongoError):
        logger.error(
            f"Storage failure on {request.method} {request.url.path}", exc_info=exc
        )
        content = {"success": False, "message": "Storage unavailable"}
        if debug:
            content["detail"] = str(exc)
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=content)
