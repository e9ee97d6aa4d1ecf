"""HTTP server running the calculator application."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress
import uvicorn

from calculator_service.common.logger import configure_logger, logger
from calculator_service.server.app import DEFAULT_PATH, create_app


class CalculatorServer(BaseModel):
    """
    HTTP server handling calculation requests from clients.

    Features:
        - Accepts only POST on the calculate endpoint.
        - Evaluates each request independently, no state is shared between requests.
        - Maps failure kinds to 422 or 500 JSON responses.
    """

    # Make the Pydantic instance immutable (read-only), the network configuration
    # must not change once the server is built.
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=8081, ge=1, le=65535, description="Server TCP port")
    path: str = Field(default=DEFAULT_PATH, pattern=r"^/", description="URL path of the calculate endpoint")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level name"
    )

    def start(self) -> None:
        """
        Configure logging, build the application and serve it until interrupted.

        :return: None
        """
        configure_logger(self.log_level)
        logger.info(f"🖥️ Starting server on {self.host}:{self.port}{self.path}")
        uvicorn.run(
            create_app(self.path),
            host=str(self.host),
            port=self.port,
            log_level=self.log_level.lower(),
        )
