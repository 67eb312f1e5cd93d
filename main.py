"""
Entry point for checking the component setup.

Initializes logging, scans the components directory and prints the
discovered handlers. Exits with a non-zero status if a handler fails to load.
"""
import asyncio
import logging
import sys

from app.logger import configure_logging
from bot.components.exceptions import ComponentLoadError

configure_logging()
log = logging.getLogger(__name__)
log.info("Logger configuration successful")


async def main() -> int:
    """
    Build the component dispatcher once.

    Returns:
        int: Process exit code.
    """
    from bot.dispatcher import setup_components
    try:
        dispatcher = await setup_components()
    except ComponentLoadError:
        log.critical("Component setup aborted")
        return 1

    log.info(f"✅ {len(dispatcher.registry)} component(s) ready")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
