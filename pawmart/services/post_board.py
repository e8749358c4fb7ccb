"""
Post Board - behaviour shared by the donation and missing-pet boards:
ownership checks, area filtering, comments and upvotes.
"""

from typing import List, Optional, Type

from loguru import logger
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import models
from ..exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from ..schemas.community import CommentCreate, PostComment, UpvoteStatus
from ..utils.validators import sanitize_string
from .user_service import get_user_row


def normalize_place(value: str) -> str:
    """Cities and areas are matched case-insensitively on trimmed values."""
    return sanitize_string(value, 100).lower()


class PostBoardService:
    """
    Base class for a board of user posts.

    Subclasses set `post_model` to the ORM class and `post_key` to the
    column that comments and upvotes use to point at it.
    """

    post_model: Type[models.Base]
    post_key: str
    label = "post"

    def __init__(self, session: Session):
        self.session = session

    def _get_post_row(self, post_id: str):
        post = self.session.get(self.post_model, post_id)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def _owned_post(self, user_id: str, post_id: str, action: str = "update"):
        post = self._get_post_row(post_id)
        if post.user_id != user_id:
            logger.warning(f"User {user_id} tried to {action} {self.label} {post_id} of another user")
            raise ForbiddenError(f"You can only {action} your own posts")
        return post

    def _in_area(self, stmt, city: Optional[str], area: Optional[str]):
        """Restrict a query to one city and area when both are given."""
        if not city or not area or not city.strip() or not area.strip():
            return stmt, False
        stmt = stmt.where(
            func.lower(self.post_model.city) == normalize_place(city),
            func.lower(self.post_model.area) == normalize_place(area),
        )
        return stmt, True

    def _key_filter(self, model, post_id: str):
        return getattr(model, self.post_key) == post_id

    def _find_upvote(self, user_id: str, post_id: str) -> Optional[models.PostUpvote]:
        stmt = select(models.PostUpvote).where(
            models.PostUpvote.user_id == user_id,
            self._key_filter(models.PostUpvote, post_id),
        )
        return self.session.scalar(stmt)

    def has_upvoted(self, user_id: str, post_id: str) -> bool:
        return self._find_upvote(user_id, post_id) is not None

    def _comments(self, post_id: str) -> List[PostComment]:
        stmt = (
            select(models.PostComment)
            .where(self._key_filter(models.PostComment, post_id))
            .order_by(models.PostComment.created_at.desc(), models.PostComment.id)
        )
        return [PostComment.model_validate(c) for c in self.session.scalars(stmt)]

    def _change_upvotes(self, post_id: str, delta: int) -> None:
        self.session.execute(
            update(self.post_model)
            .where(self.post_model.id == post_id)
            .values(upvotes_count=self.post_model.upvotes_count + delta)
            .execution_options(synchronize_session=False)
        )

    def _upvote_status(self, user_id: str, post_id: str) -> UpvoteStatus:
        self.session.expire_all()
        post = self._get_post_row(post_id)
        return UpvoteStatus(
            upvotes_count=post.upvotes_count,
            has_upvoted=self.has_upvoted(user_id, post_id),
        )

    def upvote(self, user_id: str, post_id: str) -> UpvoteStatus:
        """
        Upvote a post once.

        Recording the upvote and incrementing the post's counter happen in
        one transaction.

        Raises:
            NotFoundError: If the user or post does not exist
            ConflictError: If the user already upvoted the post
        """
        get_user_row(self.session, user_id)
        self._get_post_row(post_id)
        if self.has_upvoted(user_id, post_id):
            raise ConflictError("You have already upvoted this post")

        try:
            self.session.add(models.PostUpvote(user_id=user_id, **{self.post_key: post_id}))
            self.session.flush()
            self._change_upvotes(post_id, 1)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError("You have already upvoted this post") from e

        return self._upvote_status(user_id, post_id)

    def remove_upvote(self, user_id: str, post_id: str) -> UpvoteStatus:
        """
        Withdraw an upvote.

        Raises:
            NotFoundError: If the post does not exist
            BadRequestError: If the user has not upvoted the post
        """
        self._get_post_row(post_id)
        result = self.session.execute(
            delete(models.PostUpvote).where(
                models.PostUpvote.user_id == user_id,
                self._key_filter(models.PostUpvote, post_id),
            )
        )
        if result.rowcount != 1:
            self.session.rollback()
            raise BadRequestError("You have not upvoted this post")

        self._change_upvotes(post_id, -1)
        self.session.commit()
        return self._upvote_status(user_id, post_id)

    def add_comment(self, user_id: str, post_id: str, data: CommentCreate) -> PostComment:
        get_user_row(self.session, user_id)
        self._get_post_row(post_id)

        comment = models.PostComment(
            user_id=user_id,
            content=sanitize_string(data.content, 2000),
            **{self.post_key: post_id},
        )
        self.session.add(comment)
        self.session.commit()
        self.session.expire_all()

        logger.info(f"User {user_id} commented on {self.label} {post_id}")
        return PostComment.model_validate(comment)

    def delete_comment(self, user_id: str, post_id: str, comment_id: str) -> None:
        """
        Delete one of the caller's comments on a post.

        Raises:
            NotFoundError: If the comment does not exist on this post
            ForbiddenError: If the comment belongs to another user
        """
        comment = self.session.get(models.PostComment, comment_id)
        if comment is None or getattr(comment, self.post_key) != post_id:
            raise NotFoundError("Comment not found")
        if comment.user_id != user_id:
            raise ForbiddenError("You can only delete your own comments")

        self.session.delete(comment)
        self.session.commit()
        self.session.expire_all()

    def delete_post(self, user_id: str, post_id: str) -> None:
        """Delete a post with its comments and upvotes."""
        post = self._owned_post(user_id, post_id, action="delete")
        self.session.delete(post)
        self.session.commit()
        logger.info(f"User {user_id} deleted {self.label} {post_id}")
