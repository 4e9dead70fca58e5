from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Upstream API settings
    rick_and_morty_api_url: str = "https://rickandmortyapi.com/api/"
    request_timeout: float = 30.0  # seconds

    # Top pairs settings
    top_pairs_default_limit: int = 20

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
