import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse, Response
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from malasngoding.config import SessionLocal, create_db, settings
from malasngoding.routes.auth_routes import auth_routes
from malasngoding.routes.badge_routes import badge_routes
from malasngoding.routes.content_routes import content_routes
from malasngoding.routes.progress_routes import progress_routes
from malasngoding.routes.user_routes import user_routes
from malasngoding.services.seed_service import seed_reference_data
from malasngoding.utils.logger import clear_request_context, configure_logging, set_request_id

logger = configure_logging(log_dir=settings.LOG_DIR, level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db()
    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_reference_data(db)
        finally:
            db.close()
    yield


app = FastAPI(title="Malas Ngoding", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logger(request: Request, call_next):
    rid = set_request_id(request.headers.get("x-request-id"))
    started = time.perf_counter()
    try:
        response: Response = await call_next(request)
        logger.info(
            "%s %s status=%s duration_ms=%s",
            request.method,
            request.url.path,
            response.status_code,
            round((time.perf_counter() - started) * 1000),
        )
        response.headers["x-request-id"] = rid
        return response
    except Exception:
        logger.exception("request error method=%s path=%s", request.method, request.url.path)
        raise
    finally:
        clear_request_context()


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # Server-side errors with stack traces; client errors as warnings.
    if exc.status_code >= 500:
        logger.exception("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
    else:
        logger.warning("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("validation error method=%s path=%s errors=%s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"message": "Invalid input data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never leak internal exception details to clients.
    logger.exception("unhandled error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


@app.get("/")
def read_root():
    return {"message": "Malas Ngoding is Healthy"}


app.include_router(auth_routes, prefix="/api/auth", tags=["auth"])
app.include_router(user_routes, prefix="/api", tags=["users"])
app.include_router(content_routes, prefix="/api", tags=["content"])
app.include_router(progress_routes, prefix="/api", tags=["progress"])
app.include_router(badge_routes, prefix="/api", tags=["badges"])

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
