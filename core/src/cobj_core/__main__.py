from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import uvicorn

from cobj_core.app import create_app
from cobj_core.config import AppConfig, load_app_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: AppConfig) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                config.log_file,
                maxBytes=config.log_max_size_mb * 1024 * 1024,
                backupCount=config.log_backup_count,
                encoding="utf-8",
            )
        )
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, handlers=handlers, force=True)


def main() -> None:
    config = load_app_config()
    configure_logging(config)

    logging.getLogger(__name__).info(f"Server running on http://{config.bind_host}:{config.port}")
    uvicorn.run(create_app(config), host=config.bind_host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
