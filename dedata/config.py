"""
Server configuration.

Uses ``pydantic_settings.BaseSettings`` for environment variable
binding and type coercion.  Only the HTTP service reads these; the
capture engine takes everything it needs as arguments.
"""

from __future__ import annotations

import pydantic
import pydantic_settings


class ServerSettings(pydantic_settings.BaseSettings):
    """Host, port, and environment of the HTTP service.

    Attributes:
        host: Interface uvicorn binds to.
        port: Port uvicorn listens on.
        environment: ``production`` disables auto-reload.
    """

    host: str = pydantic.Field(default="0.0.0.0", validation_alias="DEDATA_HOST")
    port: int = pydantic.Field(default=3001, validation_alias="DEDATA_PORT")
    environment: str = pydantic.Field(default="development", validation_alias="ENVIRONMENT")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
