import logging
import sys

LOGGER_NAME = "vk"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the "vk" logger.

    A single stderr handler is attached no matter how many times this is called.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_vk_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handler._vk_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    # httpx logs request URLs with the access token in the query string
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return logger
