from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "Catalog API"
    APP_ENV: str = "dev"
    API_PREFIX: str = "/v1"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    # Locales
    DEFAULT_LOCALE: str = "ru"
    SUPPORTED_LOCALES: str = "ru,en"
    # Listing
    DEFAULT_PAGE_SIZE: int = 12
    MAX_PAGE_SIZE: int = 60
    CATALOG_PATH: str = "/catalog"
    # Data sources (None -> bundled files under catalog_api/data)
    TAXONOMY_PATH: Optional[str] = None
    CATALOG_CONTENT_PATH: Optional[str] = None
    CONTENT_PROVIDER: str = "json"

    @property
    def cors_origin_list(self) -> List[str]:
        val = self.CORS_ORIGINS
        if not val: return []
        if val == "*": return ["*"]
        return [v.strip() for v in val.split(",")]

    @property
    def locale_list(self) -> List[str]:
        return [v.strip() for v in self.SUPPORTED_LOCALES.split(",") if v.strip()]

settings = Settings()
