"""
Fast and meal database models.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    text,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Fast(Base):
    """A timed fasting period owned by one user"""

    __tablename__ = "fasts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime)
    is_active = Column(Boolean, nullable=False, default=True)
    note = Column(Text)

    # Relationships
    user = relationship("User", back_populates="fasts")
    meals = relationship("Meal", back_populates="fast", order_by="Meal.meal_time")

    __table_args__ = (
        # At most one running fast per user
        Index(
            "uq_fasts_one_active_per_user",
            "user_id",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active = 1"),
        ),
    )


class Meal(Base):
    """Free-text meal entry attached to a fast"""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    fast_id = Column(Integer, ForeignKey("fasts.id"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    meal_time = Column(DateTime, nullable=False)

    # Relationships
    fast = relationship("Fast", back_populates="meals")
