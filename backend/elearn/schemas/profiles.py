"""Profile Schemas — student/instructor profile requests and records.

Invariants:
    - Names, credentials and list items are stripped and non-empty
    - Amount bounds are left to the core (code 103 on violation)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("value cannot be empty or whitespace")
    return v


class StudentProfileCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)


class PreferencesUpdate(BaseModel):
    """Replaces the stored list wholesale."""
    preferences: list[str] = Field(max_length=20)


class InstructorProfileCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    credentials: str = Field(min_length=1, max_length=500)
    bio: str = Field("", max_length=2000)
    social_links: list[str] = Field(default_factory=list, max_length=10)

    @field_validator("name", "credentials")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return _strip_required(v)


class AchievementAward(BaseModel):
    achievement: str = Field(min_length=1, max_length=100)


class WithdrawalRequest(BaseModel):
    amount: int


class StudentProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    completed_courses: int
    total_spent: int
    achievements: list[str]
    joined_at: int
    preferences: list[str]


class InstructorProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    credentials: str
    bio: str
    social_links: list[str]
    rating: int
    total_reviews: int
    total_students: int
    total_earnings: int
