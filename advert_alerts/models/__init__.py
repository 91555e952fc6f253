from advert_alerts.models.advert import Advert, AdvertStatus
from advert_alerts.models.notification import Notification, NotificationCategory
from advert_alerts.models.user import User, UserRole

__all__ = [
    "Advert",
    "AdvertStatus",
    "Notification",
    "NotificationCategory",
    "User",
    "UserRole",
]
