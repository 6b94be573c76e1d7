import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the API and the command line."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("caesarlab").setLevel(level.upper())
