from travel_admin.models.bank import Bank
from travel_admin.repositories.bank_repository import BankRepository
from travel_admin.services.scoped_service import ScopedRecordService


class BankService(ScopedRecordService[Bank]):
    """Service for bank business logic"""

    entity_name = "bank"
    repository_class = BankRepository
    required_fields = frozenset({"name", "account_number", "ifsc_code", "account_type"})
