"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from internal.health import HealthChecker, create_clock_check, create_hostname_check
from internal.logging import get_logger, LogLevel, StructuredLogger
from ui.routes import health, ids
from xid import Generator, get_generator, set_generator

VERSION = "1.0.0"


def create_app(config=None, generator=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    # A configured host name replaces the OS one for every id this process issues
    if generator is None:
        if config.generator.hostname:
            generator = Generator(hostname=lambda: config.generator.hostname)
            set_generator(generator)
        else:
            generator = get_generator()

    health_checker = HealthChecker()
    health_checker.register("clock", create_clock_check(generator), critical=True)
    health_checker.register("hostname", create_hostname_check(generator), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info(
            "Application starting",
            version=VERSION,
            machine_tag=generator.machine_tag.hex(),
            process_tag=generator.process_tag,
        )
        yield
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="XID Service",
        version=VERSION,
        description="globally unique, time-sortable identifiers",
        lifespan=lifespan,
    )

    # Initialize route modules with dependencies
    ids.init(generator, config.server.max_batch)
    health.init(generator, health_checker)

    app.include_router(ids.router)
    app.include_router(health.router)

    return app
