from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "AMORTIZER_"}

    # App
    log_level: str = "INFO"

    # Engine
    # Upper bound on schedule length (100 years of monthly payments)
    max_schedule_periods: int = 1200

    # CLI
    future_value_periods: int = 5


settings = Settings()
