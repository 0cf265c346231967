"""ohsome-stats HTTP server. Entry point for the contribution statistics API."""

import logging
from contextlib import asynccontextmanager

from ohsome_stats.config import config_to_flat, load_config
from ohsome_stats.storage.database import Database

logger = logging.getLogger("ohsome_stats")


def main():
    """Run the stats API with uvicorn."""
    import uvicorn
    from ohsome_stats.api import create_api
    from ohsome_stats.core.services import create_services

    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logger.debug("Effective config: %s", config_to_flat(config))

    db = Database(config.db)
    svc = create_services(config=config, db=db)
    app = create_api(svc)

    @asynccontextmanager
    async def lifespan(app):
        """Open the pool on startup, close it on shutdown."""
        db.connect()
        try:
            yield
        finally:
            db.close()
            logger.info("ohsome-stats stopped.")

    app.router.lifespan_context = lifespan

    logger.info("Starting ohsome-stats (HTTP on %s:%d)", config.http_host, config.http_port)
    uvicorn.run(app, host=config.http_host, port=config.http_port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
