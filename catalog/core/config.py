from functools import lru_cache
from typing import List, Literal, Optional
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ProductCatalog"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ALLOWED_ORIGINS: str = "*"                  # CSV, "*" = any origin

    # Mongo
    MONGO_URI: str
    MONGO_DB: Optional[str] = None             # None -> database named in the URI
    mongo_default_db: str = "catalog"
    mongo_timeout_ms: int = 6000

    # Cloudinary
    CLOUDINARY_CLOUD_NAME: str
    CLOUDINARY_API_KEY: str
    CLOUDINARY_API_SECRET: str

    # Uploads
    upload_folder: str = "products"
    max_upload_files: int = 10
    allowed_image_formats: List[str] = ["jpg", "png", "jpeg"]

    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    @property
    def allowed_origins(self) -> List[str]:
        origins = [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    @property
    def image_store_configured(self) -> bool:
        return all((self.CLOUDINARY_CLOUD_NAME, self.CLOUDINARY_API_KEY, self.CLOUDINARY_API_SECRET))

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cached so every caller shares one Settings instance.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")
    return Settings(
                _env_file=_env_file_for(app_env),
                _env_file_encoding="utf-8"
    )
