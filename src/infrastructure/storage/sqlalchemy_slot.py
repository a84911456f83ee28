"""SQLAlchemy implementation of the storage slot."""

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.exceptions import StorageReadError, StorageWriteError
from infrastructure.storage.models import StorageSlotModel


class SQLAlchemySlot:
    """IStorageSlot persisted in the ``storage_slots`` table.

    Each call runs in its own session, so a write is committed before
    the call returns.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def read(self, key: str) -> str | None:
        """Get a slot value by key."""
        stmt = select(StorageSlotModel.value).where(StorageSlotModel.key == key)
        try:
            with self._session_factory() as session:
                return session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageReadError(key) from e

    def write(self, key: str, value: str) -> None:
        """Insert or replace a slot value."""
        try:
            with self._session_factory() as session, session.begin():
                model = session.get(StorageSlotModel, key)
                if model is None:
                    session.add(StorageSlotModel(key=key, value=value))
                else:
                    model.value = value
        except SQLAlchemyError as e:
            raise StorageWriteError(key) from e

    def remove(self, key: str) -> None:
        """Delete a slot; missing keys are ignored."""
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(StorageSlotModel).where(StorageSlotModel.key == key))
        except SQLAlchemyError as e:
            raise StorageWriteError(key) from e
