"""Helpers for test data generation.

Each helper creates and saves one model instance with Faker-generated
defaults; pass keyword arguments to override any field.
"""

from datetime import time

from faker import Faker

from core.enums import DayOfWeek, LifecycleState, NotificationType, UserRole, WasteType
from core.models import Area, CollectionSchedule, Notification, User

fake = Faker()


def make_area(
    latitude: float | None = 42.6629,
    longitude: float | None = 21.1655,
    **kwargs,
) -> Area:
    """Create an area centered on the given coordinates."""
    kwargs.setdefault("name", fake.unique.city())
    kwargs.setdefault("municipality", fake.city())
    return Area.objects.create(
        center_latitude=latitude,
        center_longitude=longitude,
        **kwargs,
    )


def make_schedule(
    area: Area,
    day_of_week: DayOfWeek = DayOfWeek.MONDAY,
    waste_type: WasteType = WasteType.GENERAL_WASTE,
    collection_time: time = time(8, 0),
    **kwargs,
) -> CollectionSchedule:
    """Create a collection schedule for an area."""
    return CollectionSchedule.objects.create(
        area=area,
        day_of_week=DayOfWeek(day_of_week).value,
        waste_type=WasteType(waste_type).value,
        collection_time=collection_time,
        **kwargs,
    )


def make_citizen(
    latitude: float | None = 42.6630,
    longitude: float | None = 21.1656,
    **kwargs,
) -> User:
    """Create a user; by default an active, verified citizen."""
    kwargs.setdefault("username", fake.unique.user_name())
    kwargs.setdefault("email", fake.unique.email())
    kwargs.setdefault("full_name", fake.name())
    kwargs.setdefault("role", UserRole.CITIZEN.value)
    kwargs.setdefault("email_verified", True)
    kwargs.setdefault("lifecycle_state", LifecycleState.ACTIVE.value)
    return User.objects.create(latitude=latitude, longitude=longitude, **kwargs)


def make_notification(user: User, **kwargs) -> Notification:
    """Create an in-app notification for a user."""
    kwargs.setdefault("title", fake.sentence(nb_words=3))
    kwargs.setdefault("message", fake.sentence())
    kwargs.setdefault("notification_type", NotificationType.SYSTEM_ANNOUNCEMENT.value)
    return Notification.objects.create(user=user, **kwargs)
