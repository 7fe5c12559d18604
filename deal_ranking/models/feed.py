"""FeedEntry — the only externally visible projection of a ranked deal."""

from pydantic import BaseModel, ConfigDict


class FeedEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    deal_id: str
    title: str
