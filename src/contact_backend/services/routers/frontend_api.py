from fastapi import APIRouter, status
from fastapi.responses import FileResponse, JSONResponse

from pathlib import Path
import logging

from ..models.contact_api_models import ErrorResponse

INDEX_DOCUMENT = "index.html"


class FrontendAPI:
    """
    Serves the static front end.

    Existing files under the static directory are returned as they are;
    every other GET path falls back to the root document so client side
    routing keeps working. Must be included after all API routers.
    """
    def __init__(self, static_dir: str, logger: logging.Logger):
        self.static_dir = Path(static_dir).resolve()
        self.logger = logger

        self._frontend_router = APIRouter(tags=["Frontend"])

        self._register_endpoints()

    @property
    def frontend_router(self) -> APIRouter:
        return self._frontend_router

    def get_router(self) -> APIRouter:
        return self._frontend_router

    def resolve_file(self, path: str) -> Path | None:
        """
        Maps a request path to a file inside the static directory.
        :param path: Request path without the leading slash
        :return: File path, or None when nothing safe matches
        """
        if not path:
            return None

        try:
            candidate = (self.static_dir / path).resolve()
            if not candidate.is_relative_to(self.static_dir):
                self.logger.warning("Rejected static path outside of %s: %s", self.static_dir, path)
                return None

            return candidate if candidate.is_file() else None
        except (ValueError, OSError) as e:
            self.logger.warning("Unusable static path %r: %s", path, e)
            return None

    def _register_endpoints(self):
        @self.frontend_router.api_route(
            "/{full_path:path}",
            methods=["GET", "HEAD"],
            include_in_schema=False
        )
        async def serve_frontend(full_path: str):
            file_path = self.resolve_file(full_path)
            if file_path is not None:
                return FileResponse(file_path)

            index = self.static_dir / INDEX_DOCUMENT
            if not index.is_file():
                self.logger.error("Root document is missing: %s", index)
                return JSONResponse(
                    status_code=status.HTTP_404_NOT_FOUND,
                    content=ErrorResponse(message="Not found.").model_dump()
                )

            return FileResponse(index, media_type="text/html")
