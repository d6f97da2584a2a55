import enum


class UserRole(str, enum.Enum):
    USER = "user"
    CATERER = "caterer"
    ADMIN = "admin"


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class MealType(str, enum.Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"
    FULL_DAY = "full_day"


class EventType(str, enum.Enum):
    WEDDING = "wedding"
    CORPORATE = "corporate"
    POOJA = "pooja"
    PARTY = "party"
    OTHER = "other"
