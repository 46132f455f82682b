from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from userservice import __version__


# ----------------------------
# General / App settings
# ----------------------------
class AppSettings(BaseSettings):
    app_name: str = "User Service"
    version: str = __version__
    debug: bool = False
    api_prefix: str = "/api/users"

    # Logger
    log_file: str = "app.log"  # empty disables the file sink
    log_level: str = "INFO"

    class Config:
        env_prefix = "USERSVC_"
        extra = "ignore"


# ----------------------------
# Server settings
# ----------------------------
class ServerSettings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 3000

    class Config:
        env_prefix = "USERSVC_SERVER_"
        extra = "ignore"

    def get_url(self) -> str:
        return f"http://{self.host}:{self.port}"


# ----------------------------
# Top-level settings
# ----------------------------
class Settings(BaseSettings):
    app: AppSettings = Field(default_factory=AppSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
