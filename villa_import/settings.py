from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"                # DEBUG để xem kết quả từng lần parse
    MAX_TEXT_LENGTH: int = 20_000          # ký tự, bài đăng thường chỉ vài KB

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
