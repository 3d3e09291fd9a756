"""Process-wide settings for HAL representation assembly."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HAL_", env_file=".env", extra="ignore")

    # Curies
    online_doc_url: str = "http://restheart.org/curies/1.0"

    # Paging
    default_pagesize: int = 100
    max_pagesize: int = 1000

    # Logging
    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the ``fastapi_hal`` logger namespace.

    Call once when the application starts, before mounting HAL routers::

        configure_logging()
        app = FastAPI()
        app.add_middleware(ErrorHandlerMiddleware)

    The package itself never configures handlers; its modules only log
    through ``logging.getLogger(__name__)``.
    """
    name = (level or settings.log_level).upper()
    package_log = logging.getLogger("fastapi_hal")
    package_log.setLevel(getattr(logging, name, logging.INFO))
    if not package_log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
        )
        package_log.addHandler(handler)
