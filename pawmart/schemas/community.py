"""
Community board data models: donation (rehoming) posts with adoption
applications, and missing-pet posts. Both boards share comments and upvotes.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AdoptionFormStatus(str, Enum):
    """Adoption application lifecycle."""
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class MissingPostStatus(str, Enum):
    """Whether a reported missing pet has been found."""
    NOT_FOUND = "NOT_FOUND"
    FOUND = "FOUND"


class PostAuthor(BaseModel):
    """Public view of a user shown next to posts and comments."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    image: Optional[str] = None


class CommentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1, max_length=2000)


class PostComment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    content: str
    created_at: datetime
    user: PostAuthor


class UpvoteStatus(BaseModel):
    """Upvote state of a post for the calling user."""

    upvotes_count: int
    has_upvoted: bool


# ---------------------------------------------------------------------------
# Donation posts
# ---------------------------------------------------------------------------


class DonationPostCreate(BaseModel):
    """A pet offered for adoption by its current owner."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)
    image: str = Field(default="", description="Image URL")
    country: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    area: str = Field(..., min_length=1, max_length=100)
    species: str = Field(..., min_length=1, max_length=50)
    breed: str = Field(..., min_length=1, max_length=255)
    gender: str = Field(..., min_length=1, max_length=20)
    age: int = Field(..., ge=0, description="Age in years")
    vaccinated: bool = False
    neutered: bool = False


class DonationPostUpdate(BaseModel):
    """Partial donation post update; omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1, max_length=5000)
    image: Optional[str] = None
    country: Optional[str] = Field(default=None, min_length=1, max_length=100)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    area: Optional[str] = Field(default=None, min_length=1, max_length=100)
    species: Optional[str] = Field(default=None, min_length=1, max_length=50)
    breed: Optional[str] = Field(default=None, min_length=1, max_length=255)
    gender: Optional[str] = Field(default=None, min_length=1, max_length=20)
    age: Optional[int] = Field(default=None, ge=0)
    vaccinated: Optional[bool] = None
    neutered: Optional[bool] = None
    is_available: Optional[bool] = None


class DonationPost(BaseModel):
    id: str
    user_id: str
    title: str
    description: str
    image: str
    country: str
    city: str
    area: str
    species: str
    breed: str
    gender: str
    age: int
    vaccinated: bool
    neutered: bool
    is_available: bool
    upvotes_count: int
    comment_count: int
    application_count: int
    created_at: datetime
    updated_at: datetime
    user: PostAuthor


class DonationPostDetail(DonationPost):
    comments: List[PostComment] = Field(default_factory=list)
    has_upvoted: bool = False


class AdoptionFormCreate(BaseModel):
    """Application to adopt a donated pet, proposing a meeting time."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(..., min_length=1, max_length=5000)
    meeting_schedule: datetime


class AdoptionForm(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    donation_post_id: str
    description: str
    meeting_schedule: datetime
    status: AdoptionFormStatus
    created_at: datetime
    user: PostAuthor


class Meeting(BaseModel):
    """An accepted adoption application and who meets whom."""

    application_id: str
    post_id: str
    post_title: str
    meeting_schedule: datetime
    applicant: PostAuthor
    owner: PostAuthor


class Meetings(BaseModel):
    applicant_meetings: List[Meeting] = Field(default_factory=list)
    owner_meetings: List[Meeting] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Missing-pet posts
# ---------------------------------------------------------------------------


class MissingPostCreate(BaseModel):
    """Report of a missing pet."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)
    image: str = Field(default="", description="Image URL")
    country: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    area: str = Field(..., min_length=1, max_length=100)
    species: str = Field(..., min_length=1, max_length=50)
    breed: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., ge=0, description="Age in years")


class MissingPostUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1, max_length=5000)
    image: Optional[str] = None
    country: Optional[str] = Field(default=None, min_length=1, max_length=100)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    area: Optional[str] = Field(default=None, min_length=1, max_length=100)
    species: Optional[str] = Field(default=None, min_length=1, max_length=50)
    breed: Optional[str] = Field(default=None, min_length=1, max_length=255)
    age: Optional[int] = Field(default=None, ge=0)


class MissingPostStatusUpdate(BaseModel):
    status: MissingPostStatus


class MissingPost(BaseModel):
    id: str
    user_id: str
    title: str
    description: str
    image: str
    country: str
    city: str
    area: str
    species: str
    breed: str
    age: int
    status: MissingPostStatus
    upvotes_count: int
    comment_count: int
    created_at: datetime
    updated_at: datetime
    user: PostAuthor


class MissingPostDetail(MissingPost):
    comments: List[PostComment] = Field(default_factory=list)
    has_upvoted: bool = False
