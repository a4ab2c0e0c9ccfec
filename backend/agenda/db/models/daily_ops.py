"""Daily check-in document ORM model."""
from __future__ import annotations

from sqlalchemy import Column, Date, DateTime, Index, func

from agenda.db.base import Base
from agenda.db.types import JSONBCompat


class DailyOps(Base):
    __tablename__ = "daily_ops"
    __table_args__ = (Index("ix_daily_ops_week_of", "week_of"),)

    date = Column(Date, primary_key=True)
    week_of = Column(Date, nullable=False)
    data = Column(JSONBCompat, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
