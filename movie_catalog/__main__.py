import uvicorn

from movie_catalog.app import app, logger, settings


def main():
    logger.info("server listening on http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
