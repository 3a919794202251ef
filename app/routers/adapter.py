"""
routers/adapter.py — FastAPI ↔ Controller bridge

Business Rules:
- The JSON body is passed through untouched; a missing, invalid or
  non-object body becomes an empty mapping (controllers report what is missing)
- 2xx bodies are serialized as-is (pydantic models via model_dump); a
  created Account goes out whole, including its bcrypt password hash,
  because the signup contract returns the stored Account
- Error bodies become ErrorResponse {error, status_code, request_id};
  the ServerError stack never leaves the server

Called by: routers/signup.py
Depends on: protocols, schemas.errors
"""

import json
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel

from ..protocols import Controller, HttpRequest, HttpResponse
from ..schemas.errors import ErrorResponse


async def read_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        logger.info("Ignoring unparsable request body on {}", request.url.path)
        return {}
    return body if isinstance(body, dict) else {}


def to_json_response(response: HttpResponse, request_id: str = "") -> JSONResponse:
    if 200 <= response.status_code <= 299:
        body = response.body
        if isinstance(body, BaseModel):
            content = body.model_dump(mode="json")
        else:
            content = jsonable_encoder(body)
        return JSONResponse(status_code=response.status_code, content=content)

    message = getattr(response.body, "message", None) or str(response.body)
    error = ErrorResponse(error=message, status_code=response.status_code, request_id=request_id)
    return JSONResponse(status_code=response.status_code, content=error.model_dump())


async def adapt_route(controller: Controller, request: Request) -> JSONResponse:
    body = await read_json_body(request)
    response = await controller.handle(HttpRequest(body=body))
    request_id = getattr(request.state, "request_id", "")
    return to_json_response(response, request_id)
