import uvicorn

from todoserver.config import Settings
from todoserver.logging_config import configure_logging
from todoserver.main import create_app


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
