from __future__ import annotations

import asyncio
import logging

from lightset import ConfigLoadRequest, LightsetLoader, LoggingSettings
from lightset.logging import init_logging


async def main() -> None:
    init_logging(LoggingSettings(level="DEBUG"))
    config = await LightsetLoader().load(ConfigLoadRequest(path="examples/app.conf"))

    logger = logging.getLogger("smoke")
    logger.info("Config loaded entries=%s", len(config))
    logger.info("Server port=%s workers=%s", config.get_int("server.port"), config.get_int("server.workers"))
    config.each(lambda key, value: logger.info("%s kind=%s value=%s", key, value.kind, value))


if __name__ == "__main__":
    asyncio.run(main())
