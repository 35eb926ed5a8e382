"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobassist.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and open the shared HTTP client."""
    logging.basicConfig(level=settings.log_level.upper())
    async with httpx.AsyncClient(timeout=settings.search_timeout) as client:
        app.state.http_client = client
        yield


app = FastAPI(
    title="Job Search Assistant API",
    description="Multi-source job search with AI cover letters and interview prep",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as ``{"message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Return 400 with the first validation problem spelled out."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid request: {field + ': ' if field else ''}{first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request."
    return JSONResponse(status_code=400, content={"message": message})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


# Import and include routers
from jobassist.api.routes import generate, resume, search  # noqa: E402

app.include_router(search.router, prefix="/api", tags=["Search"])
app.include_router(generate.router, prefix="/api", tags=["Generation"])
app.include_router(resume.router, prefix="/api", tags=["Resume"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
