import sys
import logging

from raycaster.config import LOG_LEVEL


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Import after logging is configured so module loggers inherit it
    from raycaster.game import Game

    Game().run()


if __name__ == "__main__":
    main()
    sys.exit()
