"""
Runtime settings for the content server.

Values come from the environment (or a local .env.example for defaults):
  LOG_LEVEL, DATA_DIR, KNOWLEDGE_BASE_PATH, FETCH_TIMEOUT_SECS, ...

CLI:
  python -m liberty_content.config.settings --verbose
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# logging bootstrap
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_EXAMPLE = PROJECT_ROOT / ".env.example"
if ENV_EXAMPLE.exists():
    load_dotenv(ENV_EXAMPLE, override=False)


class Settings(BaseSettings):
    # App
    app_name: str = Field(default="liberty-content-server", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    brand_name: str = Field(default="Liberty Gold Silver", alias="BRAND_NAME")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Storage
    data_dir: str = Field(default=f"{PROJECT_ROOT}/data", alias="DATA_DIR")
    knowledge_base_path: str = Field(
        default=f"{PROJECT_ROOT}/data/knowledge-base.json", alias="KNOWLEDGE_BASE_PATH"
    )

    # Knowledge-source fetching
    fetch_timeout_secs: int = Field(default=10, alias="FETCH_TIMEOUT_SECS")
    fetch_max_chars: int = Field(default=10000, alias="FETCH_MAX_CHARS")
    fetch_user_agent: str = Field(
        default="Mozilla/5.0 (compatible; Liberty-Content-Server/1.0)",
        alias="FETCH_USER_AGENT",
    )

    class Config:
        case_sensitive = False

    # helpers
    def get_log_level(self) -> int:
        """
        Convert string log level to logging constant.

        Returns:
            logging level constant (e.g., logging.INFO)
        """
        level_map = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL
        }
        return level_map.get(self.log_level.upper(), logging.INFO)

    def log_summary(self) -> None:
        logger.info("App: %s %s | Env: %s", self.app_name, self.app_version, self.environment)
        logger.info("Brand: %s", self.brand_name)
        logger.info("Data dir: %s", self.data_dir)
        logger.info("Knowledge base: %s (exists=%s)",
                    self.knowledge_base_path, Path(self.knowledge_base_path).exists())
        logger.info("Fetch timeout: %ss | max chars: %s", self.fetch_timeout_secs, self.fetch_max_chars)

    def ensure_directories(self):
        """Create required directories if they don't exist."""
        directories = [
            self.data_dir,
            str(Path(self.knowledge_base_path).parent),
        ]
        for directory in directories:
            if directory:
                Path(directory).mkdir(parents=True, exist_ok=True)
                logger.debug(f" - {directory}")


settings = Settings()


def configure_logging(level: int | None = None) -> None:
    """
    Install a single stderr handler on the root logger.

    stdout is reserved for the MCP stdio transport, so nothing may log there.
    """
    root = logging.getLogger()
    if not any(getattr(h, "_liberty_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._liberty_handler = True
        root.addHandler(handler)
    root.setLevel(level if level is not None else settings.get_log_level())


# CLI self-test
def _parse_args():
    import argparse
    ap = argparse.ArgumentParser(description="Settings self-test")
    ap.add_argument("--verbose", action="store_true", help="DEBUG logs")
    return ap.parse_args()


def main():
    args = _parse_args()
    configure_logging(logging.DEBUG if args.verbose else None)

    logger.info("PROJECT_ROOT=%s | .env.example exists=%s", PROJECT_ROOT, ENV_EXAMPLE.exists())
    settings.log_summary()


if __name__ == "__main__":
    main()
