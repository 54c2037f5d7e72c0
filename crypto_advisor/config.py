from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Market data (CoinGecko)
    coingecko_base_url: str = "https://api.coingecko.com/api/v3"
    coingecko_api_key: str = ""  # demo key, optional

    # News (NewsAPI, only used by the sentiment mode)
    newsapi_base_url: str = "https://newsapi.org/v2"
    newsapi_key: str = ""  # leave blank to disable news -> neutral sentiment
    news_page_size: int = 10
    news_language: str = "en"

    # HTTP
    http_timeout_seconds: float = 15.0
    news_fetch_timeout_seconds: float = 10.0
    news_max_concurrency: int = 5  # cap on in-flight news requests per recommendation

    # News cache
    news_cache_ttl_hours: float = 24.0

    # Recommendation modes
    default_mode: Literal["momentum", "sentiment"] = "momentum"
    momentum_page_size: int = 100
    momentum_top_n: int = 5
    sentiment_page_size: int = 50
    sentiment_top_n: int = 10
    max_articles_per_asset: int = 3

    # Web
    web_host: str = "0.0.0.0"
    web_port: int = 3000

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
