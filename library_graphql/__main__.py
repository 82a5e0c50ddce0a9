import logging

import uvicorn

from library_graphql import config
from library_graphql.app import create_app

logger = logging.getLogger("library_graphql")


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    logger.info("Server running on http://%s:%d%s", config.HOST, config.PORT, config.GRAPHQL_PATH)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
