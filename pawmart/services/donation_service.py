"""
Donation Service - pets offered for adoption by their owners, adoption
applications and the meetings that follow an accepted application.
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from ..db import models
from ..exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from ..schemas.community import (
    AdoptionForm,
    AdoptionFormCreate,
    AdoptionFormStatus,
    DonationPost,
    DonationPostCreate,
    DonationPostDetail,
    DonationPostUpdate,
    Meeting,
    Meetings,
    PostAuthor,
)
from ..utils.validators import sanitize_string
from .post_board import PostBoardService, normalize_place
from .user_service import get_user_row


def format_donation_post(post: models.DonationPost) -> DonationPost:
    return DonationPost(
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
        gender=post.gender,
        age=post.age,
        vaccinated=post.vaccinated,
        neutered=post.neutered,
        is_available=post.is_available,
        upvotes_count=post.upvotes_count,
        comment_count=len(post.comments),
        application_count=len(post.applications),
        created_at=post.created_at,
        updated_at=post.updated_at,
        user=PostAuthor.model_validate(post.user),
    )


def _meeting(form: models.AdoptionForm) -> Meeting:
    return Meeting(
        application_id=form.id,
        post_id=form.donation_post_id,
        post_title=form.donation_post.title,
        meeting_schedule=form.meeting_schedule,
        applicant=PostAuthor.model_validate(form.user),
        owner=PostAuthor.model_validate(form.donation_post.user),
    )


class DonationPostService(PostBoardService):
    """Donation board: rehoming posts and adoption applications."""

    post_model = models.DonationPost
    post_key = "donation_post_id"
    label = "donation post"

    def _posts_query(self):
        return (
            select(models.DonationPost)
            .options(
                selectinload(models.DonationPost.user),
                selectinload(models.DonationPost.comments),
                selectinload(models.DonationPost.applications),
            )
            .order_by(models.DonationPost.created_at.desc(), models.DonationPost.id)
        )

    def list_posts(self, city: Optional[str] = None, area: Optional[str] = None) -> List[DonationPost]:
        """
        Get donation posts, newest first.

        With both city and area given only pets still available in that
        area are returned; otherwise every post is.
        """
        stmt, filtered = self._in_area(self._posts_query(), city, area)
        if filtered:
            stmt = stmt.where(models.DonationPost.is_available.is_(True))
        return [format_donation_post(p) for p in self.session.scalars(stmt)]

    def list_user_posts(self, user_id: str) -> List[DonationPost]:
        get_user_row(self.session, user_id)
        stmt = self._posts_query().where(models.DonationPost.user_id == user_id)
        return [format_donation_post(p) for p in self.session.scalars(stmt)]

    def get_post(self, user_id: str, post_id: str) -> DonationPostDetail:
        """Get a post with its comments and whether the caller upvoted it."""
        post = self._get_post_row(post_id)
        return DonationPostDetail(
            **format_donation_post(post).model_dump(),
            comments=self._comments(post_id),
            has_upvoted=self.has_upvoted(user_id, post_id),
        )

    def create_post(self, user_id: str, data: DonationPostCreate) -> DonationPost:
        get_user_row(self.session, user_id)

        values = data.model_dump()
        values["title"] = sanitize_string(values["title"], 255)
        values["description"] = sanitize_string(values["description"], 5000)
        values["city"] = normalize_place(values["city"])
        values["area"] = normalize_place(values["area"])

        post = models.DonationPost(user_id=user_id, **values)
        self.session.add(post)
        self.session.commit()

        logger.info(f"User {user_id} created donation post {post.id} in {post.city}/{post.area}")
        return format_donation_post(post)

    def update_post(self, user_id: str, post_id: str, data: DonationPostUpdate) -> DonationPost:
        """
        Update the caller's own post.

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the post belongs to another user
        """
        post = self._owned_post(user_id, post_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for place in ("city", "area"):
            if place in changes:
                changes[place] = normalize_place(changes[place])

        for field, value in changes.items():
            setattr(post, field, value)
        self.session.commit()

        return format_donation_post(post)

    def submit_application(self, user_id: str, post_id: str, data: AdoptionFormCreate) -> AdoptionForm:
        """
        Apply to adopt a donated pet.

        Raises:
            NotFoundError: If the user or post does not exist
            BadRequestError: If the caller owns the post
            ConflictError: If the pet is no longer available or the caller already applied
        """
        get_user_row(self.session, user_id)
        post = self._get_post_row(post_id)
        if post.user_id == user_id:
            raise BadRequestError("You cannot apply to adopt your own pet")
        if not post.is_available:
            raise ConflictError("This pet is no longer available for adoption")

        existing = self.session.scalar(
            select(models.AdoptionForm.id).where(
                models.AdoptionForm.user_id == user_id,
                models.AdoptionForm.donation_post_id == post_id,
            )
        )
        if existing is not None:
            raise ConflictError("You have already applied to adopt this pet")

        form = models.AdoptionForm(
            user_id=user_id,
            donation_post_id=post_id,
            description=sanitize_string(data.description, 5000),
            meeting_schedule=data.meeting_schedule,
        )
        self.session.add(form)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError("You have already applied to adopt this pet") from e

        self.session.expire_all()
        logger.info(f"User {user_id} applied to adopt donation post {post_id}")
        return AdoptionForm.model_validate(form)

    def list_applications(self, user_id: str, post_id: str) -> List[AdoptionForm]:
        """Applications for one of the caller's posts, newest first."""
        self._owned_post(user_id, post_id, action="view applications for")
        stmt = (
            select(models.AdoptionForm)
            .where(models.AdoptionForm.donation_post_id == post_id)
            .options(selectinload(models.AdoptionForm.user))
            .order_by(models.AdoptionForm.created_at.desc(), models.AdoptionForm.id)
        )
        return [AdoptionForm.model_validate(f) for f in self.session.scalars(stmt)]

    def accept_application(self, user_id: str, form_id: str) -> AdoptionForm:
        """
        Accept one application for the caller's post.

        Accepting the application, rejecting every other application for
        the post and marking the pet unavailable happen in one transaction.
        The availability flip only succeeds while the pet is still
        available, so a post accepts at most one application.

        Raises:
            NotFoundError: If the application does not exist
            ForbiddenError: If the caller does not own the post
            ConflictError: If the pet is no longer available
        """
        form = self.session.get(models.AdoptionForm, form_id)
        if form is None:
            raise NotFoundError("Adoption form not found")
        post_id = form.donation_post_id
        if form.donation_post.user_id != user_id:
            raise ForbiddenError("Only the post owner can accept adoption applications")

        try:
            result = self.session.execute(
                update(models.DonationPost)
                .where(models.DonationPost.id == post_id, models.DonationPost.is_available.is_(True))
                .values(is_available=False)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise ConflictError("This pet is no longer available for adoption")

            self.session.execute(
                update(models.AdoptionForm)
                .where(models.AdoptionForm.donation_post_id == post_id)
                .values(status=AdoptionFormStatus.REJECTED)
                .execution_options(synchronize_session=False)
            )
            self.session.execute(
                update(models.AdoptionForm)
                .where(models.AdoptionForm.id == form_id)
                .values(status=AdoptionFormStatus.ACCEPTED)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()
        except ConflictError:
            self.session.rollback()
            logger.warning(f"User {user_id} tried to accept {form_id} for unavailable post {post_id}")
            raise
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error accepting adoption application: {e}")
            raise

        self.session.expire_all()
        logger.info(f"Accepted adoption application {form_id} for donation post {post_id}")
        return AdoptionForm.model_validate(self.session.get(models.AdoptionForm, form_id))

    def get_meetings(self, user_id: str) -> Meetings:
        """
        Accepted applications involving the caller, soonest first: as the
        applicant and as the owner of the post.
        """
        get_user_row(self.session, user_id)
        base = (
            select(models.AdoptionForm)
            .join(models.AdoptionForm.donation_post)
            .where(models.AdoptionForm.status == AdoptionFormStatus.ACCEPTED)
            .options(
                selectinload(models.AdoptionForm.user),
                selectinload(models.AdoptionForm.donation_post).selectinload(models.DonationPost.user),
            )
            .order_by(models.AdoptionForm.meeting_schedule, models.AdoptionForm.id)
        )
        as_applicant = self.session.scalars(base.where(models.AdoptionForm.user_id == user_id)).all()
        as_owner = self.session.scalars(base.where(models.DonationPost.user_id == user_id)).all()
        return Meetings(
            applicant_meetings=[_meeting(f) for f in as_applicant],
            owner_meetings=[_meeting(f) for f in as_owner],
        )
