from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "word-upload-service"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024
    keep_failed_uploads: bool = False

    docx_engine: str = "python-docx"
    extraction_timeout_seconds: float = 30.0

    openapi_yaml_path: str = "openapi.yaml"
    static_dir: str = "static"
    cors_allow_origins: list[str] = ["*"]
    contact_email: str = "support@example.com"

settings = Settings()
