"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.characters.application.character.exceptions import (
    CharacterNotFoundError,
    DuplicateCharacterNameError,
)
from apps.characters.application.common.exceptions import ApplicationError


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """pydantic 오류 목록을 필드 단위 오류로 변환합니다."""
    errors = []
    for error in exc.errors():
        # loc 첫 요소는 body/query/path
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append(
            {
                "field": ".".join(location) or str(error.get("loc", ("",))[0]),
                "message": error.get("msg", "Invalid value"),
            }
        )
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": _field_errors(exc),
            },
        )

    @app.exception_handler(CharacterNotFoundError)
    async def character_not_found_handler(request: Request, exc: CharacterNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "CHARACTER_NOT_FOUND"},
        )

    @app.exception_handler(DuplicateCharacterNameError)
    async def duplicate_name_handler(request: Request, exc: DuplicateCharacterNameError):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "DUPLICATE_CHARACTER_NAME"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
