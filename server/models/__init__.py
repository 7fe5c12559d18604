"""Pydantic request/response models for the API."""

from .feed import ErrorResponse, FeedItem, FeedRequest, RequestLocation

__all__ = [
    "ErrorResponse",
    "FeedItem",
    "FeedRequest",
    "RequestLocation",
]
