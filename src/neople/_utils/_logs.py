import logging
import sys

logger: logging.Logger = logging.getLogger("neople")


def setup_logging(should_debug: bool = False) -> None:
    """Attach a stderr handler to the ``neople`` logger.

    Calling it more than once only adjusts the level.
    """
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)

    if not any(getattr(h, "_neople_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._neople_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
