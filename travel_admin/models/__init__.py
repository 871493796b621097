# Import every model so Base.metadata knows all tables
from travel_admin.models.base import Base
from travel_admin.models.bank import Bank
from travel_admin.models.traveller import Traveller
from travel_admin.models.user import User

__all__ = ["Base", "Bank", "Traveller", "User"]
