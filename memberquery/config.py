from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Member Query API"
    app_version: str = "0.1.0"
    database_url: str = "sqlite:///./local.db"
    log_level: str = "INFO"
    log_json: bool = False
    sql_log_level: str = "WARNING"
    create_schema_on_startup: bool = True
    default_page_limit: int = 20
    max_page_limit: int = 100

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
