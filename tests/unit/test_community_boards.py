"""
Unit tests for the donation and missing-pet boards.
"""

from datetime import datetime, timedelta, timezone

import pytest

from pawmart.db import models
from pawmart.exceptions import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from pawmart.schemas.community import (
    AdoptionFormCreate,
    AdoptionFormStatus,
    CommentCreate,
    DonationPostUpdate,
    MissingPostStatus,
    MissingPostUpdate,
)
from pawmart.services import DonationPostService, MissingPostService


def application(days=1, description="We have a fenced garden"):
    return AdoptionFormCreate(
        description=description,
        meeting_schedule=datetime.now(timezone.utc) + timedelta(days=days),
    )


class TestDonationPostService:
    """Unit tests for DonationPostService."""

    @pytest.fixture
    def service(self, session):
        return DonationPostService(session)

    @pytest.fixture
    def owner(self, make_user):
        return make_user(name="Owner")

    def test_create_post_normalizes_place(self, service, owner, make_donation_post):
        post = make_donation_post(owner.id, city="  Dhaka ", area="MIRPUR")

        assert post.city == "dhaka"
        assert post.area == "mirpur"
        assert post.is_available is True
        assert post.upvotes_count == 0
        assert post.comment_count == 0
        assert post.user.name == "Owner"

    def test_create_post_unknown_user(self, make_donation_post):
        with pytest.raises(NotFoundError):
            make_donation_post("missing")

    def test_list_posts_newest_first(self, session, service, owner, make_donation_post):
        older = make_donation_post(owner.id, title="Older")
        newer = make_donation_post(owner.id, title="Newer")
        now = datetime.now(timezone.utc)
        session.get(models.DonationPost, older.id).created_at = now - timedelta(days=1)
        session.get(models.DonationPost, newer.id).created_at = now
        session.commit()

        assert [p.id for p in service.list_posts()] == [newer.id, older.id]

    def test_area_filter_is_case_insensitive(self, service, owner, make_donation_post):
        mirpur = make_donation_post(owner.id, area="Mirpur")
        make_donation_post(owner.id, area="Gulshan")

        assert [p.id for p in service.list_posts("DHAKA", " mirpur ")] == [mirpur.id]
        assert len(service.list_posts("Dhaka", None)) == 2
        assert len(service.list_posts("Dhaka", "   ")) == 2

    def test_area_filter_hides_adopted_pets(self, service, owner, make_donation_post):
        post = make_donation_post(owner.id)
        service.update_post(owner.id, post.id, DonationPostUpdate(is_available=False))

        assert service.list_posts("Dhaka", "Mirpur") == []
        assert [p.id for p in service.list_posts()] == [post.id]

    def test_list_user_posts(self, service, owner, make_user, make_donation_post):
        mine = make_donation_post(owner.id)
        make_donation_post(make_user().id)

        assert [p.id for p in service.list_user_posts(owner.id)] == [mine.id]

    def test_get_post_not_found(self, service, owner):
        with pytest.raises(NotFoundError):
            service.get_post(owner.id, "missing")

    def test_update_post(self, service, owner, make_donation_post):
        post = make_donation_post(owner.id)

        updated = service.update_post(
            owner.id, post.id, DonationPostUpdate(title="Still looking", city="Chittagong")
        )

        assert updated.title == "Still looking"
        assert updated.city == "chittagong"
        assert updated.breed == "Persian"

    def test_only_owner_can_update_or_delete(self, service, owner, make_user, make_donation_post):
        post = make_donation_post(owner.id)
        other = make_user()

        with pytest.raises(ForbiddenError):
            service.update_post(other.id, post.id, DonationPostUpdate(title="Mine now"))
        with pytest.raises(ForbiddenError):
            service.delete_post(other.id, post.id)

    def test_delete_post_removes_comments(self, session, service, owner, make_donation_post):
        post = make_donation_post(owner.id)
        comment = service.add_comment(owner.id, post.id, CommentCreate(content="Still here"))

        service.delete_post(owner.id, post.id)

        assert session.get(models.DonationPost, post.id) is None
        assert session.get(models.PostComment, comment.id) is None

    def test_upvote_once(self, service, owner, make_user, make_donation_post):
        post = make_donation_post(owner.id)
        fan = make_user()

        status = service.upvote(fan.id, post.id)
        assert status.upvotes_count == 1
        assert status.has_upvoted is True

        with pytest.raises(ConflictError):
            service.upvote(fan.id, post.id)

        status = service.remove_upvote(fan.id, post.id)
        assert status.upvotes_count == 0
        assert status.has_upvoted is False

        with pytest.raises(BadRequestError):
            service.remove_upvote(fan.id, post.id)

    def test_upvote_unknown_post(self, service, owner):
        with pytest.raises(NotFoundError):
            service.upvote(owner.id, "missing")

    def test_comments(self, service, owner, make_user, make_donation_post):
        post = make_donation_post(owner.id)
        other = make_user(name="Neighbour")

        comment = service.add_comment(other.id, post.id, CommentCreate(content="  Is she litter trained?  "))
        assert comment.content == "Is she litter trained?"
        assert comment.user.name == "Neighbour"

        detail = service.get_post(owner.id, post.id)
        assert detail.comment_count == 1
        assert [c.id for c in detail.comments] == [comment.id]

        with pytest.raises(ForbiddenError):
            service.delete_comment(owner.id, post.id, comment.id)
        with pytest.raises(NotFoundError):
            service.delete_comment(other.id, "another-post", comment.id)

        service.delete_comment(other.id, post.id, comment.id)
        assert service.get_post(owner.id, post.id).comments == []

    def test_blank_comment_rejected(self):
        with pytest.raises(ValueError):
            CommentCreate(content="   ")

    def test_cannot_apply_to_own_post(self, service, owner, make_donation_post):
        post = make_donation_post(owner.id)

        with pytest.raises(BadRequestError):
            service.submit_application(owner.id, post.id, application())

    def test_duplicate_application_conflicts(self, service, owner, make_user, make_donation_post):
        post = make_donation_post(owner.id)
        applicant = make_user()
        form = service.submit_application(applicant.id, post.id, application())

        assert form.status == AdoptionFormStatus.PENDING
        with pytest.raises(ConflictError):
            service.submit_application(applicant.id, post.id, application())

    def test_only_owner_sees_applications(self, service, owner, make_user, make_donation_post):
        post = make_donation_post(owner.id)
        applicant = make_user()
        service.submit_application(applicant.id, post.id, application())

        assert len(service.list_applications(owner.id, post.id)) == 1
        assert service.get_post(owner.id, post.id).application_count == 1
        with pytest.raises(ForbiddenError):
            service.list_applications(applicant.id, post.id)

    def test_accept_application(self, service, owner, make_user, make_donation_post):
        post = make_donation_post(owner.id)
        first, second, late = make_user(), make_user(), make_user()
        chosen = service.submit_application(first.id, post.id, application())
        passed_over = service.submit_application(second.id, post.id, application())

        with pytest.raises(ForbiddenError):
            service.accept_application(first.id, chosen.id)

        accepted = service.accept_application(owner.id, chosen.id)

        assert accepted.status == AdoptionFormStatus.ACCEPTED
        statuses = {f.id: f.status for f in service.list_applications(owner.id, post.id)}
        assert statuses == {
            chosen.id: AdoptionFormStatus.ACCEPTED,
            passed_over.id: AdoptionFormStatus.REJECTED,
        }
        assert service.get_post(owner.id, post.id).is_available is False

        with pytest.raises(ConflictError):
            service.accept_application(owner.id, passed_over.id)
        with pytest.raises(ConflictError):
            service.submit_application(late.id, post.id, application())

    def test_accept_unknown_application(self, service, owner):
        with pytest.raises(NotFoundError):
            service.accept_application(owner.id, "missing")

    def test_meetings(self, service, owner, make_user, make_donation_post):
        later_post = make_donation_post(owner.id, title="Later")
        sooner_post = make_donation_post(owner.id, title="Sooner")
        applicant = make_user()
        later = service.submit_application(applicant.id, later_post.id, application(days=5))
        sooner = service.submit_application(applicant.id, sooner_post.id, application(days=2))
        service.accept_application(owner.id, later.id)
        service.accept_application(owner.id, sooner.id)

        as_owner = service.get_meetings(owner.id)
        assert as_owner.applicant_meetings == []
        assert [m.application_id for m in as_owner.owner_meetings] == [sooner.id, later.id]
        assert as_owner.owner_meetings[0].post_title == "Sooner"
        assert as_owner.owner_meetings[0].applicant.id == applicant.id

        as_applicant = service.get_meetings(applicant.id)
        assert as_applicant.owner_meetings == []
        assert [m.owner.id for m in as_applicant.applicant_meetings] == [owner.id, owner.id]

    def test_pending_applications_are_not_meetings(self, service, owner, make_user, make_donation_post):
        post = make_donation_post(owner.id)
        applicant = make_user()
        service.submit_application(applicant.id, post.id, application())

        assert service.get_meetings(applicant.id).applicant_meetings == []


class TestMissingPostService:
    """Unit tests for MissingPostService."""

    @pytest.fixture
    def service(self, session):
        return MissingPostService(session)

    @pytest.fixture
    def owner(self, make_user):
        return make_user(name="Owner")

    def test_create_post(self, owner, make_missing_post):
        post = make_missing_post(owner.id, city="DHAKA")

        assert post.city == "dhaka"
        assert post.status == MissingPostStatus.NOT_FOUND
        assert post.user.id == owner.id

    def test_area_filter_hides_found_pets(self, service, owner, make_missing_post):
        found = make_missing_post(owner.id, title="Found cat")
        lost = make_missing_post(owner.id, title="Lost dog")
        make_missing_post(owner.id, area="Gulshan")

        service.update_status(owner.id, found.id, MissingPostStatus.FOUND)

        assert [p.id for p in service.list_posts("dhaka", "MIRPUR")] == [lost.id]
        assert len(service.list_posts()) == 3

    def test_update_status_owner_only(self, service, owner, make_user, make_missing_post):
        post = make_missing_post(owner.id)

        with pytest.raises(ForbiddenError):
            service.update_status(make_user().id, post.id, MissingPostStatus.FOUND)

        assert service.update_status(owner.id, post.id, MissingPostStatus.FOUND).status == MissingPostStatus.FOUND
        assert service.update_status(owner.id, post.id, MissingPostStatus.NOT_FOUND).status == (
            MissingPostStatus.NOT_FOUND
        )

    def test_update_post(self, service, owner, make_missing_post):
        post = make_missing_post(owner.id)

        updated = service.update_post(owner.id, post.id, MissingPostUpdate(area="Banani", age=5))

        assert updated.area == "banani"
        assert updated.age == 5
        assert updated.title == "Lost beagle"

    def test_list_user_posts(self, service, owner, make_user, make_missing_post):
        mine = make_missing_post(owner.id)
        make_missing_post(make_user().id)

        assert [p.id for p in service.list_user_posts(owner.id)] == [mine.id]

    def test_get_post_with_comments_and_upvote(self, service, owner, make_user, make_missing_post):
        post = make_missing_post(owner.id)
        helper = make_user()
        service.add_comment(helper.id, post.id, CommentCreate(content="Saw him near the lake"))
        service.upvote(helper.id, post.id)

        detail = service.get_post(helper.id, post.id)

        assert detail.comment_count == 1
        assert detail.comments[0].content == "Saw him near the lake"
        assert detail.upvotes_count == 1
        assert detail.has_upvoted is True
        assert service.get_post(owner.id, post.id).has_upvoted is False

    def test_upvotes_are_per_board(self, session, service, owner, make_donation_post, make_missing_post):
        missing = make_missing_post(owner.id)
        donation = make_donation_post(owner.id)

        service.upvote(owner.id, missing.id)
        DonationPostService(session).upvote(owner.id, donation.id)

        assert service.get_post(owner.id, missing.id).upvotes_count == 1
        assert DonationPostService(session).get_post(owner.id, donation.id).upvotes_count == 1

    def test_comment_on_other_board_not_found(self, session, service, owner, make_donation_post, make_missing_post):
        missing = make_missing_post(owner.id)
        donation = make_donation_post(owner.id)
        comment = DonationPostService(session).add_comment(owner.id, donation.id, CommentCreate(content="Hi"))

        with pytest.raises(NotFoundError):
            service.delete_comment(owner.id, missing.id, comment.id)

    def test_delete_post(self, service, owner, make_missing_post):
        post = make_missing_post(owner.id)

        service.delete_post(owner.id, post.id)

        with pytest.raises(NotFoundError):
            service.get_post(owner.id, post.id)
