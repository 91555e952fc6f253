from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from advert_alerts.errors import QueryFailure
from advert_alerts.models.advert import Advert, AdvertStatus


@dataclass(frozen=True)
class ExpiringAdvert:
    id: int
    client_name: str
    sales_rep_id: int
    end_date: Optional[datetime]


class SqlAdvertQuery:
    """Looks up active adverts by the calendar date of their end date."""

    def __init__(self, session: Session):
        self.session = session

    def find_expiring_on(self, day: date) -> List[ExpiringAdvert]:
        day_start = datetime.combine(day, datetime.min.time())
        next_day_start = day_start + timedelta(days=1)

        stmt = (
            select(
                Advert.id,
                Advert.client_name,
                Advert.sales_rep_id,
                Advert.end_date,
            )
            .where(
                Advert.status == AdvertStatus.active,
                Advert.end_date >= day_start,
                Advert.end_date < next_day_start,
            )
            .order_by(Advert.id)
        )

        try:
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError as e:
            raise QueryFailure(f"Could not load adverts ending on {day}: {e}") from e

        return [
            ExpiringAdvert(
                id=row.id,
                client_name=row.client_name,
                sales_rep_id=row.sales_rep_id,
                end_date=row.end_date,
            )
            for row in rows
        ]
