import logging

import uvicorn

from treasury_relay.core.config import settings
from treasury_relay.core.logging import configure_logging

def main():
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info("listening on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "treasury_relay.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )

if __name__ == "__main__":
    main()
