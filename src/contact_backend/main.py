import asyncio
import logging
from contextlib import asynccontextmanager

from dishka import make_async_container
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from contact_backend.config import Config, load_config
from contact_backend.core.db_manager import DatabaseManager
from contact_backend.providers.app import AdaptersProvider, GatewaysProvider, ServicesProvider
from contact_backend.services.routers.contact_api import ContactAPI
from contact_backend.services.routers.frontend_api import FrontendAPI
from contact_backend.services.models.contact_api_models import ErrorResponse

@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    logger = await container.get(logging.Logger)
    config = await container.get(Config)
    db_manager = await container.get(DatabaseManager)

    try:
        await db_manager.create_tables()
        logger.info("Database tables are ready.")
    except Exception as e:
        logger.error("Error during database initialization: %s", e, exc_info=True)
        raise

    logger.info("Server is running on port %s", config.server.port)
    logger.info("Visit http://localhost:%s to view the website", config.server.port)

    yield

    await db_manager.close()
    await container.close()
    logger.info("Database operations cleanup completed.")

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=exc.headers
    )

async def create_app(config: Config | None = None) -> FastAPI:
    container = make_async_container(
        AdaptersProvider(config),
        GatewaysProvider(),
        ServicesProvider(),
    )
    config = await container.get(Config)

    app = FastAPI(title="Contact Form API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    setup_dishka(container, app)

    contact_api = await container.get(ContactAPI)
    frontend_api = await container.get(FrontendAPI)

    app.include_router(contact_api.get_router())
    # Catch-all, keep last
    app.include_router(frontend_api.get_router())

    return app

def main():
    config = load_config(".env")
    logging.basicConfig(
        level=config.server.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = asyncio.run(create_app(config))
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level.lower()
    )

if __name__ == "__main__":
    main()
