from travel_admin.models.traveller import Traveller
from travel_admin.repositories.scoped_repository import ScopedRepository


class TravellerRepository(ScopedRepository[Traveller]):
    """Repository for Traveller model operations with multi-tenant support"""

    model = Traveller
