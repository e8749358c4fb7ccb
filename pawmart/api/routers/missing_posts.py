"""Missing-pet board routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...schemas.community import (
    CommentCreate,
    MissingPost,
    MissingPostCreate,
    MissingPostDetail,
    MissingPostStatusUpdate,
    MissingPostUpdate,
    PostComment,
    UpvoteStatus,
)
from ...services import MissingPostService
from ..dependencies import get_current_user_id, get_missing_post_service

router = APIRouter(prefix="/api/users/missingposts", tags=["missing posts"])


@router.get("", response_model=List[MissingPost])
def list_missing_posts(
    city: Optional[str] = Query(default=None),
    area: Optional[str] = Query(default=None),
    service: MissingPostService = Depends(get_missing_post_service),
) -> List[MissingPost]:
    """List missing-pet posts; with city and area, only pets still missing there."""
    return service.list_posts(city, area)


@router.post("", response_model=MissingPost, status_code=status.HTTP_201_CREATED)
def create_missing_post(
    data: MissingPostCreate,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> MissingPost:
    return service.create_post(user_id, data)


@router.get("/mine", response_model=List[MissingPost])
def list_my_missing_posts(
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> List[MissingPost]:
    return service.list_user_posts(user_id)


@router.get("/{post_id}", response_model=MissingPostDetail)
def get_missing_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> MissingPostDetail:
    return service.get_post(user_id, post_id)


@router.put("/{post_id}", response_model=MissingPost)
def update_missing_post(
    post_id: str,
    data: MissingPostUpdate,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> MissingPost:
    return service.update_post(user_id, post_id, data)


@router.patch("/{post_id}/status", response_model=MissingPost)
def update_missing_post_status(
    post_id: str,
    data: MissingPostStatusUpdate,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> MissingPost:
    """Mark the pet as found, or as missing again."""
    return service.update_status(user_id, post_id, data.status)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_missing_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> Response:
    service.delete_post(user_id, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/upvote", response_model=UpvoteStatus)
def upvote_missing_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> UpvoteStatus:
    return service.upvote(user_id, post_id)


@router.delete("/{post_id}/upvote", response_model=UpvoteStatus)
def remove_missing_upvote(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> UpvoteStatus:
    return service.remove_upvote(user_id, post_id)


@router.post("/{post_id}/comment", response_model=PostComment, status_code=status.HTTP_201_CREATED)
def comment_on_missing_post(
    post_id: str,
    data: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> PostComment:
    return service.add_comment(user_id, post_id, data)


@router.delete("/{post_id}/comment/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_missing_comment(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    service: MissingPostService = Depends(get_missing_post_service),
) -> Response:
    service.delete_comment(user_id, post_id, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
