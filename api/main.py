from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from articles import router as articles_router
from comments import router as comments_router
from core import config, db, errors
from core.log import configure_logging
from topics import router as topics_router
from users import router as users_router

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to requests via db.get_pool.
    app.state.pool = await db.create_pool()
    try:
        yield
    finally:
        pool = app.state.pool
        app.state.pool = None
        await db.close_pool(pool)


def describe_endpoints(app: FastAPI) -> dict:
    endpoints: dict[str, str] = {}
    for route in app.routes:
        if not isinstance(route, APIRoute) or not route.path.startswith("/api"):
            continue
        for method in sorted(route.methods):
            endpoints[f"{method} {route.path}"] = route.description.strip()
    return endpoints


def create_app() -> FastAPI:
    app = FastAPI(title="news-api", lifespan=lifespan)
    app.state.pool = None

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(errors.ApiError, errors.api_error_handler)
    app.add_exception_handler(RequestValidationError, errors.api_error_handler)
    app.add_exception_handler(StarletteHTTPException, errors.api_error_handler)
    app.add_exception_handler(asyncpg.PostgresError, errors.api_error_handler)
    app.add_exception_handler(Exception, errors.unhandled_error_handler)

    app.include_router(topics_router.router, prefix="/api", tags=["topics"])
    app.include_router(articles_router.router, prefix="/api", tags=["articles"])
    app.include_router(comments_router.router, prefix="/api", tags=["comments"])
    app.include_router(users_router.router, prefix="/api", tags=["users"])

    @app.get("/api")
    def get_endpoints() -> dict:
        """
        Describe every available endpoint.
        """
        return {"endpoints": describe_endpoints(app)}

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
