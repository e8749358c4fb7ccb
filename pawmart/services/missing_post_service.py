"""
Missing Post Service - reports of lost pets, searchable by area until found.
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from ..db import models
from ..schemas.community import (
    MissingPost,
    MissingPostCreate,
    MissingPostDetail,
    MissingPostStatus,
    MissingPostUpdate,
    PostAuthor,
)
from ..utils.validators import sanitize_string
from .post_board import PostBoardService, normalize_place
from .user_service import get_user_row


def format_missing_post(post: models.MissingPost) -> MissingPost:
    return MissingPost(
        id=post.id,
        user_id=post.user_id,
        title=post.title,
        description=post.description,
        image=post.image,
        country=post.country,
        city=post.city,
        area=post.area,
        species=post.species,
        breed=post.breed,
        age=post.age,
        status=post.status,
        upvotes_count=post.upvotes_count,
        comment_count=len(post.comments),
        created_at=post.created_at,
        updated_at=post.updated_at,
        user=PostAuthor.model_validate(post.user),
    )


class MissingPostService(PostBoardService):
    """Missing-pet board."""

    post_model = models.MissingPost
    post_key = "missing_post_id"
    label = "missing post"

    def _posts_query(self):
        return (
            select(models.MissingPost)
            .options(
                selectinload(models.MissingPost.user),
                selectinload(models.MissingPost.comments),
            )
            .order_by(models.MissingPost.created_at.desc(), models.MissingPost.id)
        )

    def list_posts(self, city: Optional[str] = None, area: Optional[str] = None) -> List[MissingPost]:
        """
        Get missing-pet posts, newest first.

        With both city and area given only pets still missing in that area
        are returned; otherwise every post is.
        """
        stmt, filtered = self._in_area(self._posts_query(), city, area)
        if filtered:
            stmt = stmt.where(models.MissingPost.status == MissingPostStatus.NOT_FOUND)
        return [format_missing_post(p) for p in self.session.scalars(stmt)]

    def list_user_posts(self, user_id: str) -> List[MissingPost]:
        get_user_row(self.session, user_id)
        stmt = self._posts_query().where(models.MissingPost.user_id == user_id)
        return [format_missing_post(p) for p in self.session.scalars(stmt)]

    def get_post(self, user_id: str, post_id: str) -> MissingPostDetail:
        post = self._get_post_row(post_id)
        return MissingPostDetail(
            **format_missing_post(post).model_dump(),
            comments=self._comments(post_id),
            has_upvoted=self.has_upvoted(user_id, post_id),
        )

    def create_post(self, user_id: str, data: MissingPostCreate) -> MissingPost:
        get_user_row(self.session, user_id)

        values = data.model_dump()
        values["title"] = sanitize_string(values["title"], 255)
        values["description"] = sanitize_string(values["description"], 5000)
        values["city"] = normalize_place(values["city"])
        values["area"] = normalize_place(values["area"])

        post = models.MissingPost(user_id=user_id, **values)
        self.session.add(post)
        self.session.commit()

        logger.info(f"User {user_id} reported missing pet {post.id} in {post.city}/{post.area}")
        return format_missing_post(post)

    def update_post(self, user_id: str, post_id: str, data: MissingPostUpdate) -> MissingPost:
        post = self._owned_post(user_id, post_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for place in ("city", "area"):
            if place in changes:
                changes[place] = normalize_place(changes[place])

        for field, value in changes.items():
            setattr(post, field, value)
        self.session.commit()

        return format_missing_post(post)

    def update_status(self, user_id: str, post_id: str, status: MissingPostStatus) -> MissingPost:
        """
        Mark the caller's missing pet as found or missing again.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the post belongs to another user
        """
        post = self._owned_post(user_id, post_id)
        post.status = status
        self.session.commit()

        logger.info(f"Missing post {post_id} marked {status.value}")
        return format_missing_post(post)
