from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

MSG_INVALID_BODY = "Invalid request body"


class InvalidRequest(Exception):
    """Client error reported as HTTP 400 with a ``message`` body."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def invalid_request_handler(request: Request, exc: InvalidRequest) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": MSG_INVALID_BODY})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidRequest, invalid_request_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
