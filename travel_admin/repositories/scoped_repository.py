"""Base repository for tenant-owned, soft-deletable models."""

from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from travel_admin.repositories.filters import RecordFilter

ModelT = TypeVar("ModelT")


class ScopedRepository(Generic[ModelT]):
    """
    Data access for a model carrying business_id and is_deleted columns.

    Every read and write goes through a RecordFilter so tenant scope and
    soft-delete state are applied in one place.
    """

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db
        for column in ("business_id", "is_deleted"):
            if not hasattr(self.model, column):
                raise ValueError(
                    f"{self.model.__name__} does not define {column} and cannot be tenant-scoped."
                )

    def create(self, record: ModelT) -> ModelT:
        """Create new record"""
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def find(self, record_filter: RecordFilter) -> list[ModelT]:
        """All matching records, newest first"""
        query = record_filter.apply(self.db.query(self.model), self.model)
        return query.order_by(self.model.created_at.desc()).all()

    def find_one(self, record_filter: RecordFilter) -> ModelT | None:
        """First matching record or None"""
        return record_filter.apply(self.db.query(self.model), self.model).first()

    def update_one(self, record_filter: RecordFilter, changes: dict[str, Any]) -> ModelT | None:
        """
        Apply changes to the record matched by record_filter.

        Returns the updated record, or None if nothing matches.
        """
        record = self.find_one(record_filter)
        if record is None:
            return None
        for field, value in changes.items():
            setattr(record, field, value)
        self.db.commit()
        self.db.refresh(record)
        return record

    def set_deleted(self, record_filter: RecordFilter, deleted: bool) -> ModelT | None:
        """Flip the soft-delete flag on the matched record"""
        return self.update_one(record_filter, {"is_deleted": deleted})
