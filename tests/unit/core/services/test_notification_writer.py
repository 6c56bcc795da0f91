"""Tests for NotificationWriter."""

import uuid
from datetime import timedelta
from unittest.mock import patch

from django.core.exceptions import ValidationError
from django.utils import timezone

import pytest

from core.enums import NotificationType
from core.exceptions import NotificationNotFoundError
from core.models import Notification
from core.services.notification_writer import NotificationWriter
from tests.factories import make_citizen, make_notification


@pytest.fixture
def writer():
    """Provide a NotificationWriter."""
    return NotificationWriter()


@pytest.fixture
def citizen(db):
    """Provide a citizen owning notifications."""
    return make_citizen()


@pytest.mark.django_db
class TestCreate:
    """Tests for NotificationWriter.create."""

    def test_create_persists_unread_notification(self, writer, citizen):
        """Test that a new notification is unread with a creation time."""
        notification = writer.create(
            citizen,
            "Collection Reminder",
            "Tomorrow's ORGANIC collection at 07:30 in Downtown",
            NotificationType.COLLECTION_REMINDER,
        )

        stored = Notification.objects.get(notification_id=notification.notification_id)
        assert stored.user_id == citizen.user_id
        assert stored.notification_type == "COLLECTION_REMINDER"
        assert stored.is_read is False
        assert stored.read_at is None
        assert stored.created_at is not None
        assert stored.related_report_id is None

    def test_create_with_report_reference(self, writer, citizen):
        """Test storing the optional report reference."""
        notification = writer.create(
            citizen,
            "Report assigned",
            "Your report was assigned",
            NotificationType.REPORT_ASSIGNED,
            related_report_id=42,
        )

        assert notification.related_report_id == 42

    def test_create_accepts_maximum_lengths(self, writer, citizen):
        """Test that a 200-character title and 1000-character message are stored."""
        notification = writer.create(
            citizen, "t" * 200, "m" * 1000, NotificationType.SYSTEM_ANNOUNCEMENT
        )

        stored = Notification.objects.get(notification_id=notification.notification_id)
        assert len(stored.title) == 200
        assert len(stored.message) == 1000

    @pytest.mark.parametrize(
        ("title", "message", "field"),
        [
            ("t" * 201, "Body", "title"),
            ("Title", "m" * 1001, "message"),
            ("", "Body", "title"),
        ],
    )
    def test_create_rejects_invalid_text(self, writer, citizen, title, message, field):
        """Test that oversized or empty text is rejected before anything is written."""
        with pytest.raises(ValidationError) as exc_info:
            writer.create(citizen, title, message, NotificationType.SYSTEM_ANNOUNCEMENT)

        assert field in exc_info.value.message_dict
        assert not Notification.objects.filter(user=citizen).exists()


@pytest.mark.django_db
class TestReadState:
    """Tests for read-state transitions."""

    def test_mark_read_sets_timestamp(self, writer, citizen):
        """Test that mark_read flips the flag and records read_at."""
        notification = make_notification(citizen)

        result = writer.mark_read(notification.notification_id)

        assert result.is_read is True
        assert result.read_at is not None

    def test_mark_read_is_idempotent(self, writer, citizen):
        """Test that marking twice keeps the first read_at."""
        notification = make_notification(citizen)
        first = writer.mark_read(notification.notification_id).read_at

        second = writer.mark_read(notification.notification_id).read_at

        assert second == first

    def test_mark_read_unknown_id_raises(self, writer):
        """Test that an unknown ID raises NotificationNotFoundError."""
        with pytest.raises(NotificationNotFoundError):
            writer.mark_read(uuid.uuid4())

    def test_mark_all_read_counts_only_unread(self, writer, citizen):
        """Test that mark_all_read returns the number of flipped rows."""
        other = make_citizen()
        make_notification(citizen)
        make_notification(citizen)
        make_notification(citizen, is_read=True, read_at=timezone.now())
        make_notification(other)

        assert writer.mark_all_read(citizen.user_id) == 2
        assert writer.unread_count(citizen.user_id) == 0
        assert writer.unread_count(other.user_id) == 1

    def test_mark_all_read_is_idempotent(self, writer, citizen):
        """Test that a second mark_all_read keeps every read_at untouched."""
        first_read = timezone.now() - timedelta(hours=1)
        earlier_read = first_read - timedelta(days=2)
        make_notification(citizen)
        make_notification(citizen)
        make_notification(citizen, is_read=True, read_at=earlier_read)
        with patch("django.utils.timezone.now", return_value=first_read):
            assert writer.mark_all_read(citizen.user_id) == 2
        read_at_before = dict(
            Notification.objects.filter(user=citizen).values_list("notification_id", "read_at")
        )

        assert writer.mark_all_read(citizen.user_id) == 0

        read_at_after = dict(
            Notification.objects.filter(user=citizen).values_list("notification_id", "read_at")
        )
        assert read_at_after == read_at_before
        assert sorted(read_at_after.values()) == [earlier_read, first_read, first_read]
        assert writer.unread_count(citizen.user_id) == 0

    def test_unread_count_matches_unread_rows(self, writer, citizen):
        """Test that unread_count equals the number of unread rows."""
        for _ in range(3):
            make_notification(citizen)
        writer.mark_read(make_notification(citizen).notification_id)

        assert writer.unread_count(citizen.user_id) == 3
        assert writer.unread_count(citizen.user_id) == Notification.objects.filter(
            user=citizen, is_read=False
        ).count()


@pytest.mark.django_db
class TestListAndDelete:
    """Tests for listing and deletion."""

    def test_list_for_user_newest_first(self, writer, citizen):
        """Test ordering and ownership of listed notifications."""
        now = timezone.now()
        older = make_notification(citizen, created_at=now - timedelta(hours=1))
        newer = make_notification(citizen, created_at=now)
        make_notification(make_citizen())

        assert list(writer.list_for_user(citizen.user_id)) == [newer, older]

    def test_list_for_user_unread_only(self, writer, citizen):
        """Test filtering to unread notifications."""
        unread = make_notification(citizen)
        make_notification(citizen, is_read=True)

        assert list(writer.list_for_user(citizen.user_id, unread_only=True)) == [unread]

    def test_delete_by_owner(self, writer, citizen):
        """Test that the owner can delete a notification."""
        notification = make_notification(citizen)

        writer.delete(notification.notification_id, citizen.user_id)

        assert not Notification.objects.filter(
            notification_id=notification.notification_id
        ).exists()

    def test_delete_by_other_user_raises(self, writer, citizen):
        """Test that another user's notification is reported as not found."""
        notification = make_notification(citizen)

        with pytest.raises(NotificationNotFoundError):
            writer.delete(notification.notification_id, make_citizen().user_id)

        assert Notification.objects.filter(
            notification_id=notification.notification_id
        ).exists()

    def test_delete_older_than(self, writer, citizen):
        """Test the retention sweep removes only old notifications."""
        now = timezone.now()
        make_notification(citizen, created_at=now - timedelta(days=120))
        make_notification(citizen, created_at=now - timedelta(days=91))
        recent = make_notification(citizen, created_at=now - timedelta(days=1))

        deleted = writer.delete_older_than(now - timedelta(days=90))

        assert deleted == 2
        assert list(Notification.objects.all()) == [recent]
