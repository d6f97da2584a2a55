# caterease/db/models/menu.py
from sqlalchemy import Column, Integer, String, ForeignKey, Boolean, JSON
from sqlalchemy.orm import relationship
from caterease.db.base import Base


class Menu(Base):
    __tablename__ = "menus"

    id = Column(Integer, primary_key=True, index=True)
    caterer_id = Column(Integer, ForeignKey("caterers.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String, nullable=False)
    meal_type = Column(String, nullable=False)
    description = Column(String, nullable=True)

    # Pricing
    price_per_plate = Column(Integer, nullable=False)

    items = Column(JSON, nullable=False)

    is_vegetarian = Column(Boolean, nullable=False, default=False)
    is_special = Column(Boolean, nullable=False, default=False)

    # deleted menus are deactivated so existing orders keep their reference
    is_active = Column(Boolean, nullable=False, default=True)

    caterer = relationship("Caterer", back_populates="menus")
