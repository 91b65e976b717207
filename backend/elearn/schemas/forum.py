"""Forum Schemas — discussion post requests and records."""

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    content: str = Field(min_length=1, max_length=5000)


class DiscussionPostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author: str
    content: str
    upvotes: int
    created_at: int
