import logging

import uvicorn

from todo_api.config import Settings
from todo_api.main import create_app

logger = logging.getLogger("todo_api")


def main() -> None:
    settings = Settings.from_env()
    app = create_app(settings)

    logger.info("Todo API listening at http://%s:%s", settings.host, settings.port)
    logger.info("Access the list at http://%s:%s/todos", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
