"""FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from .config import Settings, settings
from .domain_errors import DomainError
from .logging_config import configure_logging
from .middleware import log_requests
from .problem_details import domain_error_handler
from .routers import system, users


def check_production_cors(config: Settings) -> None:
    """Fail closed on a wildcard origin in production (credentials are allowed)."""
    if config.is_production and "*" in config.cors_origins:
        raise RuntimeError("ALLOWED_ORIGINS must be explicit in production (no wildcard when using credentials).")


configure_logging(settings.LOG_LEVEL)
check_production_cors(settings)

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="REST backend: Postgres, JWT and bcrypt",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)
app.middleware("http")(log_requests)

app.add_exception_handler(DomainError, domain_error_handler)

# Include routers
app.include_router(users.router, prefix="/api/v1")
app.include_router(system.router, prefix="/api/v1")


@app.get("/", response_class=HTMLResponse)
def root():
    """Root endpoint."""
    return "server is working."
