from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.api.v1 import routers
import logging
from app.core.config import settings
from app.core.exceptions import AuthException, InputValidationException
from app.db.session import connect_db_pool, close_db_pool
from app.middleware.auth_middleware import CheckTokenMiddleware

logging.basicConfig(level=settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_db_pool()
    yield
    await close_db_pool()

app = FastAPI(
    title="Cookie Auth API",
    description="User registration, cookie sessions and token-protected user routes",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CheckTokenMiddleware, protected_prefixes=("/api/v1/users",))

app.include_router(routers.router)


@app.exception_handler(InputValidationException)
async def input_validation_handler(request: Request, exc: InputValidationException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.detail, "errors": exc.errors},
    )


@app.exception_handler(AuthException)
async def auth_exception_handler(request: Request, exc: AuthException):
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.detail})


@app.get("/")
async def root():
    return {"msg": "Cookie Auth API is running."}
