import logging

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.assessment_matrices.router import router as assessment_matrices_router
from app.companies.router import router as companies_router
from app.config import settings
from app.dashboard.router import router as dashboard_router
from app.errors import register_exception_handlers
from app.middleware.error_handler import ErrorHandlerMiddleware
from app.middleware.logging import RequestLoggingMiddleware
from app.performance_cycles.router import router as performance_cycles_router
from app.performance_cycles.router import summary_router as performance_cycle_summary_router
from app.teams.router import router as teams_router

structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.LOG_LEVEL.upper()),
    ),
    logger_factory=structlog.PrintLoggerFactory(),
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Agile Checkup Dashboard Analytics",
        version="0.1.0",
        docs_url="/docs",
    )

    cors_origins = settings.cors_origins
    allow_any_origin = "*" in cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        # Browsers reject a wildcard origin on credentialed responses
        allow_credentials=not allow_any_origin,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        ErrorHandlerMiddleware,
        allow_origin="*" if allow_any_origin else None,
    )

    register_exception_handlers(app)

    app.include_router(companies_router)
    app.include_router(performance_cycles_router)
    app.include_router(performance_cycle_summary_router)
    app.include_router(assessment_matrices_router)
    app.include_router(teams_router)
    app.include_router(dashboard_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
