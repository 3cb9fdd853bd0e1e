# Copyright (c) 2025 LifeLogix contributors
# This file is part of the LifeLogix - Personal Life Log project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

import logging
import os

from lifelogix.models import database
from lifelogix.models import *  # registers all models

from lifelogix.routers import auth_router, journal_router, activity_router, goal_router
from lifelogix.utils.errors import LifeLogixError

from lifelogix.utils.rate_limit_utils import limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create DB tables in one go
    database.Base.metadata.create_all(bind=database.engine)
    logger.info("Database tables ready")
    yield


# Create FastAPI app with lifespan
app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="LifeLogix API",
    description="Private journal, activity and goal tracking backend",
    version="1.0"
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router.router)
app.include_router(journal_router.router)
app.include_router(activity_router.router)
app.include_router(goal_router.router)


# ---------------------- ADDING EXCEPTION HANDLERS ----------------------
@app.exception_handler(LifeLogixError)
async def lifelogix_error_handler(request: Request, exc: LifeLogixError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        # Internal details stay in the log
        return JSONResponse(status_code=exc.status_code, content={"msg": "Server Error"})
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # An id that cannot exist is reported like any other missing record
    if errors and all(err.get("loc", ("",))[0] == "path" for err in errors):
        return JSONResponse(status_code=404, content={"msg": "Not found"})
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
    return JSONResponse(status_code=400, content={"msg": f"Invalid {field}: {first.get('msg', 'bad value')}"})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request, exc):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please slow down."}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"msg": "Server Error"})


@app.get("/")
def read_root():
    return {"message": "Welcome to the LifeLogix Backend!"}


@app.get("/health", tags=["Infra"])
def health_check():
    return {"status": "ok"}
