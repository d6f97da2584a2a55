from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime, func
from sqlalchemy.orm import relationship
from caterease.db.base import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    caterer_id = Column(Integer, ForeignKey("caterers.id"), nullable=False, index=True)
    menu_id = Column(Integer, ForeignKey("menus.id"), nullable=False)

    event_type = Column(String, nullable=False)
    no_of_plates = Column(Integer, nullable=False)
    # snapshot of no_of_plates * menu.price_per_plate at checkout
    total_price = Column(Integer, nullable=False)

    event_date = Column(Date, nullable=False)
    event_time = Column(String, nullable=False)

    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    special_instructions = Column(String, nullable=True)

    status = Column(String, nullable=False, default="pending")

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # relationships
    user = relationship("User", foreign_keys=[user_id])
    caterer = relationship("Caterer", foreign_keys=[caterer_id])
    menu = relationship("Menu", foreign_keys=[menu_id])
