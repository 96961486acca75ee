import logging
import os
from dataclasses import dataclass

MIN_PIXEL_WIDTH = 2
MAX_PIXEL_WIDTH = 4096


@dataclass
class ProxySettings:
    port: int
    default_width: int
    default_dither: str
    default_strength: float
    default_palette: str
    default_resolution: str
    timeout: float
    retries: int
    cache_ttl: float
    cache_size: int
    log_level: str

    @classmethod
    def from_env(cls) -> "ProxySettings":
        return cls(
            port=int(os.getenv("PORT", "5600")),
            default_width=int(os.getenv("DEFAULT_WIDTH", "128")),
            default_dither=os.getenv("DEFAULT_DITHER", "none").lower(),
            default_strength=float(os.getenv("DEFAULT_STRENGTH", "0.1")),
            default_palette=os.getenv("DEFAULT_PALETTE", ""),
            default_resolution=os.getenv("DEFAULT_RESOLUTION", "original").lower(),
            timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            retries=int(os.getenv("SOURCE_RETRIES", "2")),
            cache_ttl=float(os.getenv("CACHE_TTL", "5")),
            cache_size=int(os.getenv("CACHE_SIZE", "16")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


SETTINGS = ProxySettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("pixel-proxy")
