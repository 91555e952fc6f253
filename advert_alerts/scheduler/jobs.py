from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from advert_alerts.checker import ExpiryChecker
from advert_alerts.clock import FixedClock, SystemClock
from advert_alerts.config import get_settings
from advert_alerts.db.database import get_sync_session
from advert_alerts.models import Advert, AdvertStatus
from advert_alerts.notifications.service import NotificationService
from advert_alerts.queries import SqlAdvertQuery


def check_expiring_adverts(today: Optional[date] = None):
    """檢查明天到期的廣告並通知業務"""
    settings = get_settings()
    clock = FixedClock(today) if today else SystemClock()

    with get_sync_session() as session:
        checker = ExpiryChecker(
            clock=clock,
            adverts=SqlAdvertQuery(session),
            notifier=NotificationService(session),
            stop_on_first_failure=settings.expiry_stop_on_first_failure,
        )
        checker.run()


def update_remaining_days(today: Optional[date] = None) -> Dict[str, int]:
    """重新計算剩餘天數並將已結束的廣告標記為過期"""
    today = (FixedClock(today) if today else SystemClock()).today()
    logger.info(f"Updating remaining days at {datetime.now()}")

    with get_sync_session() as session:
        try:
            result = _update_remaining_days(session, today)
        except Exception:
            session.rollback()
            logger.exception("Error updating remaining days")
            raise

    logger.info(f"Updated {result['updated']} adverts, expired {result['expired']}")
    return result


def _update_remaining_days(session: Session, today: date) -> Dict[str, int]:
    active = session.scalars(
        select(Advert).where(
            Advert.status == AdvertStatus.active,
            Advert.end_date.is_not(None),
        )
    ).all()

    # Calendar date comparison, the time of day on end_date is ignored
    for advert in active:
        advert.remaining_days = max(0, (advert.end_date.date() - today).days)

    expired = [advert for advert in active if advert.remaining_days <= 0]
    for advert in expired:
        advert.status = AdvertStatus.expired
        logger.info(f"Expired advert {advert.client_name} (ID: {advert.id})")

    session.commit()
    return {"updated": len(active), "expired": len(expired)}
