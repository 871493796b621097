from travel_admin.models.bank import Bank
from travel_admin.repositories.scoped_repository import ScopedRepository


class BankRepository(ScopedRepository[Bank]):
    """Repository for Bank model operations with multi-tenant support"""

    model = Bank
