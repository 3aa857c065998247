import dataclasses

import dotenv

from aes_keywrap.utils import env


dotenv.load_dotenv()


@dataclasses.dataclass
class Config:
    """Runtime settings for the command-line tool and its logging."""

    # Logging
    log_level: str = env("LOG_LEVEL:INFO")
    loki_url: str = env("LOKI_URL:", convert=str)
    loki_enabled: bool = env("LOKI_ENABLED:false", convert=lambda x: x.lower() == "true")

    environment: str = env("ENVIRONMENT:development")


def get_config() -> Config:
    """Get application configuration."""
    cfg = Config()

    env_value = getattr(cfg, "environment", None)
    if not env_value or not env_value.strip():
        raise ValueError("ENVIRONMENT variable is required but not set or empty")

    # Loki needs a push URL
    if cfg.loki_enabled and not cfg.loki_url:
        object.__setattr__(cfg, "loki_enabled", False)

    return cfg
