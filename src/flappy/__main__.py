"""
Entry point: python -m flappy
"""

import logging
import sys

import pygame

from .app import AssetLoadError, FlappyApp, WindowError
from .constants import LOG_LEVEL

logger = logging.getLogger("flappy")


def main() -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app = FlappyApp()
    try:
        app.setup()
        app.run()
    except (AssetLoadError, WindowError) as e:
        logger.error("Startup failed: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
