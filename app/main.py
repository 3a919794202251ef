"""
Signup Service — FastAPI application

Wires logging, the MongoDB connection, middleware, error handlers and
routers. Controllers are built once here and reused for every request.
"""
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import APP_VERSION, settings
from .database import MongoConnection, get_db
from .factories import make_signup_controller
from .logging_config import setup_logging
from .routers import signup
from .schemas.errors import ErrorResponse

setup_logging()


# --- App Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    mongo = MongoConnection()
    await mongo.connect(settings.mongo_url, settings.mongo_db_name, settings.mongo_timeout_ms)
    app.state.mongo = mongo
    app.state.signup_controller = make_signup_controller(mongo)
    logger.info("Signup service {} started", APP_VERSION)
    try:
        yield
    finally:
        await mongo.disconnect()


app = FastAPI(
    title="Signup Service",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None,
)


# --- Middleware ---
@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = uuid.uuid4().hex[:8]
    request.state.request_id = request_id
    with logger.contextualize(request_id=request_id):
        response = await call_next(request)
        logger.info("{} {} -> {}", request.method, request.url.path, response.status_code)
    response.headers["X-Request-ID"] = request_id
    return response


# --- Error Handlers ---
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = ErrorResponse(
        error=str(exc.detail),
        status_code=exc.status_code,
        request_id=getattr(request.state, "request_id", ""),
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    body = ErrorResponse(
        error="Internal server error",
        status_code=500,
        request_id=getattr(request.state, "request_id", ""),
    )
    return JSONResponse(status_code=500, content=body.model_dump())


# --- Routes ---
app.include_router(signup.router)


@app.get("/health", tags=["health"])
async def health(mongo: MongoConnection = Depends(get_db)):
    if not await mongo.ping():
        raise HTTPException(503, "Could not connect to MongoDB")
    return {"status": "ok", "mongo": "ok", "version": APP_VERSION}
