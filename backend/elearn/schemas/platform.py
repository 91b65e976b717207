"""Platform Schemas — fee update and config read."""

from pydantic import BaseModel, ConfigDict


class FeeUpdate(BaseModel):
    fee_percentage: int


class PlatformConfigResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    owner: str
    fee_percentage: int
    next_course_id: int
    next_post_id: int
    total_fees_collected: int
    sequence_number: int = 0
