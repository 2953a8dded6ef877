"""
Trip model: one stay outside the country
"""
from sqlalchemy import CheckConstraint, Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from travel_tracker.core.db import Base


class Trip(Base):
    """
    Trip represents one absence from the country.
    Both departure and return days count as days outside.
    """
    __tablename__ = "trips"
    __table_args__ = (
        CheckConstraint("return_date >= departure_date", name="ck_trips_date_order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    destination = Column(String(255), nullable=False)
    departure_date = Column(Date, nullable=False, index=True)
    return_date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="trips")

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Trip id={self.id} {self.departure_date}..{self.return_date}>"
