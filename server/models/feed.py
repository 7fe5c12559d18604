"""Feed-related Pydantic models."""

from pydantic import BaseModel, Field


class RequestLocation(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class FeedRequest(BaseModel):
    user_id: str
    location: RequestLocation


class FeedItem(BaseModel):
    deal_id: str
    title: str


class ErrorResponse(BaseModel):
    error: str
