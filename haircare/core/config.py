from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CLASSIFIER_BASE_URL: str | None = None
    CLASSIFIER_ENDPOINT: str = "classify"
    CLASSIFIER_TIMEOUT_SECONDS: float = 30.0
    MOCK_HAIR_TYPE: str = "wavy"

    SCAN_STORE_PROVIDER: str = "memory"
    SCAN_STORE_DATA_DIR: str = "./data/scans"
    AUTO_SAVE_SCANS: bool = True


settings = Settings()
