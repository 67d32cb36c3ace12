"""FastAPI daemon that owns the navigation router."""
import logging
import os
import signal
import sys
from contextlib import asynccontextmanager
from typing import Callable

import uvicorn
from fastapi import FastAPI, Request

from ..config import get_config
from ..host import Host, ZellijHost
from ..router import Router
from . import state
from .routers import pipe, status


def setup_logging():
    """Configure logging for the application."""
    # Get log level from environment or default to INFO
    log_level = os.getenv('ZJNAV_LOG_LEVEL', 'INFO').upper()

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )

    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)  # Reduce HTTP noise
    logging.getLogger('uvicorn.error').setLevel(logging.INFO)

    logging.getLogger('zjnav').setLevel(getattr(logging, log_level, logging.INFO))


def create_app(host_factory: Callable[[], Host] = ZellijHost) -> FastAPI:
    """Build the daemon app; the router is created when the app starts."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        logger = logging.getLogger(__name__)

        logger.info("Starting zjnav server...")

        config = get_config()
        router = Router(
            host_factory(),
            move_mod=config.keys.move_mod,
            resize_mod=config.keys.resize_mod,
            modal_editors=config.editors.modal,
        )
        router.load()
        app.state.router = router
        logger.info(f"Router ready (move_mod={router.move_mod.value}, resize_mod={router.resize_mod.value})")

        state.server_dir.mkdir(exist_ok=True)
        (state.server_dir / "server.pid").write_text(str(os.getpid()))

        yield

        (state.server_dir / "server.pid").unlink(missing_ok=True)
        logger.info("zjnav server stopped")

    app = FastAPI(title="zjnav server", lifespan=lifespan)

    app.include_router(pipe.router, prefix="/pipe", tags=["pipe"])
    app.include_router(status.router, prefix="/state", tags=["state"])

    @app.get("/")
    async def root(request: Request):
        """Server info."""
        return {
            "status": "running",
            "pid": os.getpid(),
            "pending": request.app.state.router.pending,
        }

    return app


def cleanup_and_exit(signum=None, frame=None):
    """Clean up and exit gracefully."""
    (state.server_dir / "server.pid").unlink(missing_ok=True)
    sys.exit(0)


def run_server():
    """Run the daemon on the configured host and port."""
    config = get_config()

    signal.signal(signal.SIGTERM, cleanup_and_exit)

    try:
        uvicorn.run(create_app(), host=config.server.host, port=config.server.port)
    except KeyboardInterrupt:
        pass
    finally:
        cleanup_and_exit()


if __name__ == "__main__":
    run_server()
