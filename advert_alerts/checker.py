from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Optional, Protocol, Sequence, Tuple

from loguru import logger

from advert_alerts.clock import Clock
from advert_alerts.models.notification import NotificationCategory
from advert_alerts.notifications.formatter import format_expiring_advert
from advert_alerts.queries import ExpiringAdvert


class AdvertQuery(Protocol):
    def find_expiring_on(self, day: date) -> Sequence[ExpiringAdvert]: ...


class Notifier(Protocol):
    def create_notification(
        self,
        recipient_id: int,
        title: str,
        message: str,
        category: NotificationCategory,
        reference_id: Optional[int],
    ) -> Any: ...


class ExpiryChecker:
    """Notifies sales reps about their active adverts that end tomorrow.

    One run computes tomorrow from ``clock``, loads the matching adverts and
    creates one ``warning`` notification per advert, sequentially and in query
    order. Nothing is deduplicated: running twice on the same day notifies
    twice.

    Every failure is logged and swallowed at the top of :meth:`run`. With
    ``stop_on_first_failure`` (the default) a failed notification aborts the
    remaining ones; otherwise each advert is attempted and the failures are
    counted in the summary line.
    """

    def __init__(
        self,
        clock: Clock,
        adverts: AdvertQuery,
        notifier: Notifier,
        stop_on_first_failure: bool = True,
    ):
        self.clock = clock
        self.adverts = adverts
        self.notifier = notifier
        self.stop_on_first_failure = stop_on_first_failure

    def run(self) -> None:
        logger.info("Checking for adverts expiring soon")
        try:
            tomorrow = self.clock.today() + timedelta(days=1)
            adverts = self.adverts.find_expiring_on(tomorrow)
            logger.info(f"Found {len(adverts)} adverts expiring tomorrow ({tomorrow})")

            sent, failed = self._notify_all(adverts)

            if failed:
                logger.warning(
                    f"Sent {sent} of {len(adverts)} expiring advert notifications "
                    f"({failed} failed)"
                )
            else:
                logger.info(f"Sent {sent} expiring advert notifications")
        except Exception:
            logger.exception("Error checking expiring adverts")

    def _notify_all(self, adverts: Sequence[ExpiringAdvert]) -> Tuple[int, int]:
        sent = 0
        failed = 0
        for advert in adverts:
            try:
                self._notify(advert)
            except Exception:
                if self.stop_on_first_failure:
                    raise
                logger.exception(
                    f"Failed to notify rep {advert.sales_rep_id} about advert {advert.id}"
                )
                failed += 1
            else:
                sent += 1
        return sent, failed

    def _notify(self, advert: ExpiringAdvert) -> None:
        title, message = format_expiring_advert(advert.client_name)
        self.notifier.create_notification(
            advert.sales_rep_id,
            title,
            message,
            NotificationCategory.warning,
            advert.id,
        )
