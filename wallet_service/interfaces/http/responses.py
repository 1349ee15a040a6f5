"""Render service results as the JSON response envelope."""

from __future__ import annotations

from typing import Any, Callable, Optional

from fastapi.responses import JSONResponse

from wallet_service.modules.common import ServiceResult
from wallet_service.schemas import ApiResponse


def envelope(status_code: int, message: str, data: Any = None) -> JSONResponse:
    body = ApiResponse[Any](code=status_code, message=message, data=data)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True))


def render(result: ServiceResult, convert: Optional[Callable[[Any], Any]] = None) -> JSONResponse:
    """Render ``result`` verbatim; ``convert`` maps successful data to a schema."""
    data = result.data
    if data is not None and convert is not None:
        data = convert(data)
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json", by_alias=True)
    return envelope(int(result.status_code), result.message, data)


__all__ = ["envelope", "render"]
