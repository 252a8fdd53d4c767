"""``perch serve`` — development server.

Wraps a resolved Router in the ASGI adapter and runs it on a
single-worker pounce server. For development only.
"""

import argparse
import logging
import sys

from perch.app import Router
from perch.cli._resolve import resolve_router
from perch.errors import ConfigurationError
from perch.server.asgi import ASGIAdapter

logger = logging.getLogger("perch.server")


def run_server(args: argparse.Namespace) -> None:
    """Start the development server.

    CLI flags override the router's configured host and port.
    """
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = router.config
    host = args.host or config.host
    port = args.port or config.port

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    run_dev_server(router, host, port)


def run_dev_server(router: Router, host: str, port: int) -> None:
    """Serve *router* on a pounce server bound to *host*:*port*.

    pounce takes an ASGI callable, so the router is wrapped in
    ``ASGIAdapter`` first. Blocks until the server stops.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    server_config = ServerConfig(host=host, port=port, workers=1, reload=False)
    logger.info("perch serving %d routes on http://%s:%d", len(router.routes), host, port)
    Server(server_config, ASGIAdapter(router)).run()
