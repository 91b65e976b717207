"""Course Schemas — catalog and enrollment requests and records.

Invariants:
    - price, progress and rating bounds are checked by the core (code 103)
    - CourseUpdate needs at least one field
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CourseCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    price: int
    content_hash: str = Field(min_length=1, max_length=256)
    category: str = Field(min_length=1, max_length=100)
    description: str = Field("", max_length=5000)
    prerequisites: list[int] = Field(default_factory=list, max_length=10)


class CourseUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    price: int | None = None
    content_hash: str | None = Field(None, min_length=1, max_length=256)
    category: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=5000)

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.model_dump(exclude_none=True):
            raise ValueError("course update requires at least one field")
        return self


class CourseActivation(BaseModel):
    is_active: bool


class ProgressUpdate(BaseModel):
    progress: int


class CertificateRequest(BaseModel):
    certificate_hash: str = Field(min_length=1, max_length=256)


class RatingRequest(BaseModel):
    rating: int


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    instructor: str
    price: int
    content_hash: str
    category: str
    description: str
    is_active: bool
    total_students: int
    average_rating: int
    total_ratings: int
    prerequisites: list[int]
    created_at: int


class EnrollmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    enrolled_at: int
    last_accessed: int
    completed: bool
    progress: int
    rating: int | None
    completion_certificate: str | None
