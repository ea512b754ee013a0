from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # remote notifications api
    api_base_url: str = "http://localhost:8000/api"
    api_token: str | None = None
    request_timeout_seconds: float = 10.0

    # polling
    realtime_enabled: bool = True
    poll_interval_seconds: float = 30.0
    stats_poll_interval_seconds: float = 20.0

    # push channel (redis pub/sub)
    push_enabled: bool = False
    redis_url: str = "redis://redis:6379/0"
    push_channel: str = "notifications"

settings = Settings()
