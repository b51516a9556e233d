from dishka import Provider, Scope, provide
import logging

from contact_backend.config import Config, load_config
from contact_backend.core.db_manager import DatabaseManager
from contact_backend.core.gateways import ContactMessageGateway

from contact_backend.services.routers.contact_api import ContactAPI
from contact_backend.services.routers.frontend_api import FrontendAPI

class AdaptersProvider(Provider):
    def __init__(self, config: Config | None = None):
        super().__init__()
        self._config = config

    @provide(scope=Scope.APP)
    def get_config(self) -> Config:
        return self._config or load_config(".env")

    @provide(scope=Scope.APP)
    def get_logger(self) -> logging.Logger:
        return logging.getLogger("contact_backend")

    @provide(scope=Scope.APP)
    def get_db_manager(self, config: Config) -> DatabaseManager:
        return DatabaseManager(config)

class GatewaysProvider(Provider):
    @provide(scope=Scope.REQUEST)
    def get_contact_message_gateway(
            self,
            db_manager: DatabaseManager,
            logger: logging.Logger
    ) -> ContactMessageGateway:
        return ContactMessageGateway(db_manager, logger)

class ServicesProvider(Provider):
    @provide(scope=Scope.APP)
    def get_contact_api(self, logger: logging.Logger) -> ContactAPI:
        return ContactAPI(logger=logger)

    @provide(scope=Scope.APP)
    def get_frontend_api(
            self,
            config: Config,
            logger: logging.Logger
    ) -> FrontendAPI:
        return FrontendAPI(
            static_dir=config.server.static_dir,
            logger=logger
        )
