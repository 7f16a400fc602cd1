"""SQLAlchemy ORM models for stored outlook snapshots"""

import uuid
from sqlalchemy import BigInteger, Column, Date, DateTime, Integer, JSON, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class OutlookSnapshot(Base):
    """One computed forecast + health score for a user"""

    __tablename__ = "outlook_snapshot"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    as_of = Column(Date, nullable=False)
    horizon_days = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)
    band = Column(Text, nullable=False)
    status = Column(Text, nullable=False)
    days_until_crisis = Column(Integer, nullable=True)
    starting_balance_cents = Column(BigInteger, nullable=False)
    totals = Column(JSON, nullable=False)
    points = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
