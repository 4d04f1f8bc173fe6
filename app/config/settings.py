import os
import sys
from functools import lru_cache

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel

load_dotenv()

class Settings(BaseModel):
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    operator_private_key: str | None = None

    @staticmethod
    def web3_url(chain_id: int) -> str | None:
        """RPC endpoint for a chain, read from WEB3_URL_{chain_id}"""
        return os.getenv(f"WEB3_URL_{chain_id}")


@lru_cache
def get_settings() -> Settings:
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        operator_private_key=os.getenv("OPERATOR_PRIVATE_KEY") or None,
    )


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)
