"""
Main entrypoint used by CI and Docker.

This script:
- Parses and validates the server configuration from the command line
- Starts the HTTP calculator server in the foreground
"""

import argparse
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, IPvAnyAddress, ValidationError

from calculator_service.server.app import DEFAULT_PATH
from calculator_service.server.server import CalculatorServer


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    host : IPvAnyAddress
        Address the server binds to.
    port : int
        TCP port the server listens on.
    path : str
        URL path of the calculate endpoint.
    log_level : str
        Logging level name.
    """

    host: IPvAnyAddress
    port: int = Field(ge=1, le=65535)
    path: str = Field(pattern=r"^/")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Arithmetic calculator HTTP server"
    )

    parser.add_argument("--host", default="127.0.0.1", help="Address to bind to")
    parser.add_argument("--port", default=8081, type=int, help="Port to listen on")
    parser.add_argument("--path", default=DEFAULT_PATH, help="URL path of the calculate endpoint")
    parser.add_argument("--log-level", default="INFO", type=str.upper, help="Logging level")

    args = parser.parse_args(argv)

    try:
        return CliArgs(host=args.host, port=args.port, path=args.path, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def build_server(cli_args: CliArgs) -> CalculatorServer:
    """
    Build the server from validated CLI arguments.

    :param cli_args: Validated CLI arguments
    :return: Server ready to start
    """
    return CalculatorServer(
        host=cli_args.host,
        port=cli_args.port,
        path=cli_args.path,
        log_level=cli_args.log_level,
    )


def main() -> None:
    """
    Main function executed by CI or Docker.
    """
    cli_args = parse_args()
    server = build_server(cli_args)
    server.start()


if __name__ == "__main__":
    main()
