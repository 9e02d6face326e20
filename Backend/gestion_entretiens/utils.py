from datetime import datetime, timezone
from typing import Optional

from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder


def utc_now() -> datetime:
    """Naive UTC timestamp, matching how DateTime columns are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def error_resp(message: str, status_code: int = 500, code: Optional[str] = None):
    """
    Standardized Error Response
    """
    content = {"error": message}
    if code:
        content["code"] = code
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def message_resp(message: str, status_code: int = 200, **extra):
    return JSONResponse(status_code=status_code, content=jsonable_encoder({"message": message, **extra}))
