import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    CREATE_TABLES = False

    PAGE_STORE_STRICT = _env_flag("PAGE_STORE_STRICT", True)

    CATALOG_API_BASE = os.getenv("CATALOG_API_BASE", "http://localhost:8080")
    CATALOG_API_AUTH = os.getenv("CATALOG_API_AUTH")
    CATALOG_TIMEOUT_SECONDS = float(os.getenv("CATALOG_TIMEOUT_SECONDS", "10"))
    CATALOG_CACHE_TTL_SECONDS = float(os.getenv("CATALOG_CACHE_TTL_SECONDS", "30"))

    REVIEW_API_BASE = os.getenv("REVIEW_API_BASE", "https://dapi.tourvis.com")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI")
    CREATE_TABLES = True
    PAGE_STORE_STRICT = _env_flag("PAGE_STORE_STRICT", False)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    CREATE_TABLES = True
    PAGE_STORE_STRICT = True
    CATALOG_API_BASE = "http://catalog.test"
    CATALOG_API_AUTH = None
    REVIEW_API_BASE = "http://reviews.test"

class ProductionConfig(BaseConfig):
    DEBUG = False
    PAGE_STORE_STRICT = _env_flag("PAGE_STORE_STRICT", True)


config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
