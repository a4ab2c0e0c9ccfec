"""Weekly agenda document ORM model."""
from __future__ import annotations

from sqlalchemy import Column, Date, DateTime, func

from agenda.db.base import Base
from agenda.db.types import JSONBCompat


class WeeklyAgenda(Base):
    __tablename__ = "weekly_agendas"

    week_of = Column(Date, primary_key=True)
    data = Column(JSONBCompat, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
