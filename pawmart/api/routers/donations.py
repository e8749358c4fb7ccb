"""Donation board routes: rehoming posts and adoption applications."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...schemas.community import (
    AdoptionForm,
    AdoptionFormCreate,
    CommentCreate,
    DonationPost,
    DonationPostCreate,
    DonationPostDetail,
    DonationPostUpdate,
    Meetings,
    PostComment,
    UpvoteStatus,
)
from ...services import DonationPostService
from ..dependencies import get_current_user_id, get_donation_service

router = APIRouter(prefix="/api/users/donation", tags=["donations"])


@router.get("", response_model=List[DonationPost])
def list_donation_posts(
    city: Optional[str] = Query(default=None),
    area: Optional[str] = Query(default=None),
    service: DonationPostService = Depends(get_donation_service),
) -> List[DonationPost]:
    """List donation posts; with city and area, only available pets there."""
    return service.list_posts(city, area)


@router.post("", response_model=DonationPost, status_code=status.HTTP_201_CREATED)
def create_donation_post(
    data: DonationPostCreate,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> DonationPost:
    return service.create_post(user_id, data)


@router.get("/mine", response_model=List[DonationPost])
def list_my_donation_posts(
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> List[DonationPost]:
    return service.list_user_posts(user_id)


@router.get("/meetings", response_model=Meetings)
def get_meetings(
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> Meetings:
    """Accepted adoption meetings for the caller as applicant and as owner."""
    return service.get_meetings(user_id)


@router.put("/application/{form_id}/accept", response_model=AdoptionForm)
def accept_application(
    form_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> AdoptionForm:
    return service.accept_application(user_id, form_id)


@router.get("/{post_id}", response_model=DonationPostDetail)
def get_donation_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> DonationPostDetail:
    return service.get_post(user_id, post_id)


@router.put("/{post_id}", response_model=DonationPost)
def update_donation_post(
    post_id: str,
    data: DonationPostUpdate,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> DonationPost:
    return service.update_post(user_id, post_id, data)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_donation_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> Response:
    service.delete_post(user_id, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/upvote", response_model=UpvoteStatus)
def upvote_donation_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> UpvoteStatus:
    return service.upvote(user_id, post_id)


@router.delete("/{post_id}/upvote", response_model=UpvoteStatus)
def remove_donation_upvote(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> UpvoteStatus:
    return service.remove_upvote(user_id, post_id)


@router.post("/{post_id}/comment", response_model=PostComment, status_code=status.HTTP_201_CREATED)
def comment_on_donation_post(
    post_id: str,
    data: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> PostComment:
    return service.add_comment(user_id, post_id, data)


@router.delete("/{post_id}/comment/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_donation_comment(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> Response:
    service.delete_comment(user_id, post_id, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/apply", response_model=AdoptionForm, status_code=status.HTTP_201_CREATED)
def apply_to_adopt(
    post_id: str,
    data: AdoptionFormCreate,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> AdoptionForm:
    """Apply to adopt a donated pet, proposing a meeting time."""
    return service.submit_application(user_id, post_id, data)


@router.get("/{post_id}/applications", response_model=List[AdoptionForm])
def list_applications(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: DonationPostService = Depends(get_donation_service),
) -> List[AdoptionForm]:
    return service.list_applications(user_id, post_id)
