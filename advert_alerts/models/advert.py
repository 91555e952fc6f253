from __future__ import annotations

import enum
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from advert_alerts.db.database import Base
from advert_alerts.models.base import TimestampMixin

if TYPE_CHECKING:
    from advert_alerts.models.user import User


class AdvertStatus(enum.Enum):
    pending = "pending"
    active = "active"
    expired = "expired"
    cancelled = "cancelled"


class Advert(Base, TimestampMixin):
    __tablename__ = "adverts"

    id: Mapped[int] = mapped_column(primary_key=True)
    client_name: Mapped[str] = mapped_column(String(255), nullable=False)
    caption: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[AdvertStatus] = mapped_column(
        Enum(AdvertStatus), default=AdvertStatus.pending, nullable=False
    )
    sales_rep_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    start_date: Mapped[Optional[date]] = mapped_column(Date)
    # Only the calendar date matters; the time of day may be set by imports
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime, index=True)
    remaining_days: Mapped[Optional[int]] = mapped_column(Integer)

    sales_rep: Mapped["User"] = relationship(back_populates="adverts")

    def __repr__(self) -> str:
        return f"<Advert {self.client_name} ({self.status.value})>"
