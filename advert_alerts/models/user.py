from __future__ import annotations

import enum
from typing import TYPE_CHECKING, List

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from advert_alerts.db.database import Base
from advert_alerts.models.base import TimestampMixin

if TYPE_CHECKING:
    from advert_alerts.models.advert import Advert


class UserRole(enum.Enum):
    admin = "admin"
    sales_rep = "sales_rep"


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole), default=UserRole.sales_rep, nullable=False
    )

    adverts: Mapped[List["Advert"]] = relationship(back_populates="sales_rep")

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role.value})>"
