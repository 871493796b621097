"""Authorization-scoped CRUD shared by every tenant-owned entity."""

import logging
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_admin.core.exceptions import (
    InvalidIdentifierException,
    NotFoundException,
    StoreException,
)
from travel_admin.core.tenancy import resolve_scope, resolve_tenant_id
from travel_admin.models.actor import Actor
from travel_admin.repositories.filters import RecordFilter, is_valid_record_id
from travel_admin.repositories.scoped_repository import ScopedRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Never writable through an update payload
SERVER_OWNED_FIELDS = frozenset({"id", "business_id", "is_deleted", "created_at", "updated_at"})


class ScopedRecordService(Generic[ModelT]):
    """
    Create / list / get / update / soft-delete for one entity type.

    Subclasses set entity_name, repository_class and required_fields.
    Every operation resolves the actor's scope through resolve_scope() and
    builds a RecordFilter; identifiers are validated before any store access.
    """

    entity_name: str
    repository_class: type[ScopedRepository]
    required_fields: frozenset[str] = frozenset()

    def __init__(self, db: Session):
        self.db = db
        self.repo = self.repository_class(db)

    @property
    def label(self) -> str:
        return self.entity_name.capitalize()

    @contextmanager
    def store_operation(self, description: str):
        """Translate persistence faults into StoreException after rolling back"""
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("%s: store fault", description)
            raise StoreException(description, str(e))

    def validate_id(self, record_id: str) -> None:
        if not is_valid_record_id(record_id):
            raise InvalidIdentifierException(f"Invalid {self.entity_name} ID")

    def not_found(self) -> NotFoundException:
        return NotFoundException(f"{self.label} not found")

    def create(self, data: BaseModel, actor: Actor) -> ModelT:
        """
        Create a record owned by the actor's tenant.

        Any tenant value a client might send is ignored: business_id always
        comes from resolve_tenant_id().
        """
        business_id = resolve_tenant_id(actor)
        values = data.model_dump()
        values["business_id"] = business_id
        values["is_deleted"] = False

        with self.store_operation(f"Failed to create {self.entity_name}"):
            record = self.repo.create(self.repo.model(**values))

        logger.info("Created %s %s for business %s", self.entity_name, record.id, business_id)
        return record

    def list_records(
        self, actor: Actor, deleted: bool | None = None, owner_id: str | None = None
    ) -> list[ModelT]:
        """List records visible to the actor, newest first"""
        record_filter = RecordFilter.for_listing(resolve_scope(actor), deleted, owner_id)
        with self.store_operation(f"Failed to fetch {self.entity_name}s"):
            return self.repo.find(record_filter)

    def get(self, record_id: str, actor: Actor) -> ModelT:
        """
        Get an active record within the actor's scope.

        Raises:
            InvalidIdentifierException: If record_id is malformed
            NotFoundException: If nothing matches (including other tenants' records)
        """
        self.validate_id(record_id)
        record_filter = RecordFilter.active(resolve_scope(actor), record_id)
        with self.store_operation(f"Failed to fetch {self.entity_name} by ID"):
            record = self.repo.find_one(record_filter)
        if record is None:
            raise self.not_found()
        return record

    def update(self, record_id: str, data: BaseModel, actor: Actor) -> ModelT:
        """Partially update an active record; business_id can never change"""
        self.validate_id(record_id)
        record_filter = RecordFilter.active(resolve_scope(actor), record_id)
        changes = self.changes_from(data)

        with self.store_operation(f"Failed to update {self.entity_name}"):
            record = self.repo.update_one(record_filter, changes)
        if record is None:
            raise self.not_found()

        logger.info("Updated %s %s fields=%s", self.entity_name, record.id, sorted(changes))
        return record

    def soft_delete(self, record_id: str, actor: Actor) -> ModelT:
        """Flag a record deleted. Already-deleted records are accepted."""
        return self._set_deleted(record_id, actor, True)

    def _set_deleted(self, record_id: str, actor: Actor, deleted: bool) -> ModelT:
        self.validate_id(record_id)
        record_filter = RecordFilter.any_state(resolve_scope(actor), record_id)
        operation = "delete" if deleted else "restore"

        with self.store_operation(f"Failed to {operation} {self.entity_name}"):
            record = self.repo.set_deleted(record_filter, deleted)
        if record is None:
            raise self.not_found()

        logger.info("%s %s is_deleted=%s", self.label, record.id, deleted)
        return record

    def changes_from(self, data: BaseModel) -> dict[str, Any]:
        """Fields the client actually sent, minus server-owned ones and nulled required ones"""
        changes = data.model_dump(exclude_unset=True)
        for field in SERVER_OWNED_FIELDS:
            changes.pop(field, None)
        for field in self.required_fields:
            if field in changes and changes[field] is None:
                del changes[field]
        return changes
