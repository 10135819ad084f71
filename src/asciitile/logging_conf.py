import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
