from __future__ import annotations

from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from advert_alerts.errors import NotificationFailure
from advert_alerts.models.notification import Notification, NotificationCategory


class NotificationService:
    """Creates in-app notifications stored in the database."""

    def __init__(self, session: Session):
        self.session = session

    def create_notification(
        self,
        recipient_id: int,
        title: str,
        message: str,
        category: NotificationCategory = NotificationCategory.info,
        reference_id: Optional[int] = None,
    ) -> Notification:
        """Insert a notification and commit it as its own unit of work.

        Raises:
            NotificationFailure: if the row could not be written.
        """
        notification = Notification(
            user_id=recipient_id,
            title=title,
            message=message,
            type=NotificationCategory(category),
            related_id=reference_id,
        )
        try:
            self.session.add(notification)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.debug(f"Create notification error for user {recipient_id}: {e}")
            raise NotificationFailure(
                f"Could not create notification for user {recipient_id}",
                reference_id=reference_id,
            ) from e

        logger.debug(
            f"Created {notification.type.value} notification "
            f"for user {recipient_id} (ref={reference_id})"
        )
        return notification
