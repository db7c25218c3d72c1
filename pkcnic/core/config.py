from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "PkCnic"
    API_V1_PREFIX: str = "/api/v1"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
