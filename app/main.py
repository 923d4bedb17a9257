from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.app_containers import ApplicationContainer
from app.core.logger import logger
from app.core.settings import settings
from app.storage.database import dispose_engine
from app.v1_0.v1_router import v1_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s %s starting in %s", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("%s shutdown, engine disposed", settings.APP_NAME)


def create_app() -> FastAPI:
    prefix = settings.API_PREFIX

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        openapi_url=f"{prefix}/openapi.json",
        docs_url=f"{prefix}/docs",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer()

    origins = settings.CORS_ORIGINS_LIST
    # browsers refuse credentials with a wildcard origin
    allow_credentials = "*" not in origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    api = APIRouter(prefix=prefix)
    api.include_router(v1_router)

    @api.get("/", tags=["health"])
    @api.get("/ready", tags=["health"])
    async def ready():
        return {
            "message": "ready",
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "env": settings.APP_ENV,
            "prefix": prefix,
        }

    app.include_router(api)
    return app


app = create_app()
