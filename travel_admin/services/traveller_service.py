from travel_admin.models.actor import Actor
from travel_admin.models.traveller import Traveller
from travel_admin.repositories.traveller_repository import TravellerRepository
from travel_admin.services.scoped_service import ScopedRecordService


class TravellerService(ScopedRecordService[Traveller]):
    """Service for traveller business logic"""

    entity_name = "traveller"
    repository_class = TravellerRepository
    required_fields = frozenset({"name"})

    def restore(self, traveller_id: str, actor: Actor) -> Traveller:
        """Clear the deleted flag, under the same tenant scoping as delete"""
        return self._set_deleted(traveller_id, actor, False)
