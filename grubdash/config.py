from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "GrubDash API"
    log_level: str = "INFO"

    # Optional JSON arrays preloaded into the in-memory stores at startup
    seed_dishes_file: str | None = None
    seed_orders_file: str | None = None

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
