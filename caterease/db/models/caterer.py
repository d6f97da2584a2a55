# caterease/db/models/caterer.py
from sqlalchemy import Column, Integer, String, ForeignKey, JSON
from sqlalchemy.orm import relationship
from caterease.db.base import Base


class Caterer(Base):
    __tablename__ = "caterers"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)

    business_name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    location = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)

    # plate-count range accepted per order
    min_plate = Column(Integer, nullable=False)
    max_plate = Column(Integer, nullable=False)

    # review aggregates; rating is the rounded mean of rating_total / review_count
    rating = Column(Integer, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    rating_total = Column(Integer, nullable=False, default=0)

    specialties = Column(JSON, nullable=False, default=list)
    event_types = Column(JSON, nullable=False, default=list)

    user = relationship("User", back_populates="caterer")
    menus = relationship("Menu", back_populates="caterer", order_by="Menu.id")
