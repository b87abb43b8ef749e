from fastapi.responses import JSONResponse

from app.core.errors import STATUS_FOR, ErrorKind, Failure


def error_response(failure: Failure, overrides: dict[ErrorKind, int] | None = None) -> JSONResponse:
    """Failure -> {"error": message} 응답"""
    status_code = (overrides or {}).get(failure.kind, STATUS_FOR[failure.kind])
    return JSONResponse(status_code=status_code, content={"error": failure.message})
