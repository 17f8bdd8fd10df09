import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(lineno)d - %(levelname)s - %(message)s"


def configure_logging(log_level: str = "INFO") -> None:
    """Configure the root logger once for the whole service."""
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger("todo_api").setLevel(log_level)

    # SQL echo stays off unless explicitly asked for
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
