# import every model so Base.metadata knows all tables and string relationships resolve
from caterease.db.models.user import User, UserSession
from caterease.db.models.caterer import Caterer
from caterease.db.models.menu import Menu
from caterease.db.models.order import Order
from caterease.db.models.review import Review

__all__ = ["User", "UserSession", "Caterer", "Menu", "Order", "Review"]
