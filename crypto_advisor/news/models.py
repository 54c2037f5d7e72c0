from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NewsArticle(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    published_at: datetime | None = None  # informational only
    url: str = ""
    source: str = ""
