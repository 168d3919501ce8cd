from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    ENV_STATE: Optional[str] = None

    """Loads the dotenv file."""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class GlobalConfig(BaseConfig):
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "formdata"
    MONGODB_COLLECTION: str = "FormData"
    MONGODB_TIMEOUT_MS: int = 5000
    # Store a bcrypt hash instead of the submitted password
    HASH_PASSWORDS: bool = False
    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:5173",
    ]
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


class DevConfig(GlobalConfig):
    LOG_LEVEL: str = "DEBUG"
    DEBUG: bool = True
    model_config = SettingsConfigDict(env_prefix="DEV_")


class ProdConfig(GlobalConfig):
    model_config = SettingsConfigDict(env_prefix="PROD_")


class TestConfig(GlobalConfig):
    MONGODB_DATABASE: str = "formdata_test"
    model_config = SettingsConfigDict(env_prefix="TEST_")


@lru_cache()
def get_config(env_state: Optional[str] = None) -> GlobalConfig:
    """Instantiate config based on the environment."""
    configs = {"dev": DevConfig, "prod": ProdConfig, "test": TestConfig}
    env_state = env_state or BaseConfig().ENV_STATE or "dev"
    if env_state not in configs:
        raise ValueError(f"Unknown ENV_STATE '{env_state}', expected one of {sorted(configs)}")
    return configs[env_state]()
