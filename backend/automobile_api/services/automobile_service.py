"""
Domain service for automobile records.

Both the REST router and the GraphQL schema go through this class; neither
adapter touches the session directly. Missing records come back as None
and store failures propagate unchanged after the session is rolled back.
"""
import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..models.automobile_model import Automobile as AutomobileModel
from ..schemas.automobile_schema import Automobile

logger = logging.getLogger(__name__)


def store_error_message(exc: Exception) -> str:
    """Return the driver's own message for a store error."""
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig).strip()
    return str(exc)


class AutomobileService:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(AutomobileModel)

    def _find(self, automobile_id: int) -> Optional[AutomobileModel]:
        return self._query().filter(AutomobileModel.id == automobile_id).first()

    def list_all(self) -> List[Automobile]:
        records = self._query().order_by(AutomobileModel.id).all()
        return [Automobile.model_validate(record) for record in records]

    def get_by_id(self, automobile_id: int) -> Optional[Automobile]:
        record = self._find(automobile_id)
        if record is None:
            return None
        return Automobile.model_validate(record)

    def create(
        self,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        vin: Optional[str] = None,
    ) -> Automobile:
        record = AutomobileModel(make=make, model=model, year=year, vin=vin)
        self.db.add(record)
        try:
            self.db.commit()
            self.db.refresh(record)
        except Exception as e:
            logger.error(f"Failed to create automobile: {store_error_message(e)}")
            self.db.rollback()
            raise
        logger.info(f"Automobile created: {record.id}")
        return Automobile.model_validate(record)

    def update(
        self,
        automobile_id: int,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        vin: Optional[str] = None,
    ) -> Optional[Automobile]:
        """
        Replace all four attributes of an automobile.

        Attributes not supplied are written as null. Returns None without
        writing anything when no record has this id.
        """
        record = self._find(automobile_id)
        if record is None:
            return None

        record.make = make
        record.model = model
        record.year = year
        record.vin = vin
        try:
            self.db.commit()
            self.db.refresh(record)
        except Exception as e:
            logger.error(f"Failed to update automobile {automobile_id}: {store_error_message(e)}")
            self.db.rollback()
            raise
        logger.info(f"Automobile {automobile_id} updated")
        return Automobile.model_validate(record)

    def delete_by_id(self, automobile_id: int) -> str:
        try:
            deleted = self._query().filter(AutomobileModel.id == automobile_id).delete(
                synchronize_session=False
            )
            self.db.commit()
        except Exception as e:
            logger.error(f"Failed to delete automobile {automobile_id}: {store_error_message(e)}")
            self.db.rollback()
            raise
        logger.info(f"Automobile {automobile_id} delete affected {deleted} row(s)")
        return f"Automobile with ID {automobile_id} deleted"


def get_automobile_service(db: Session = Depends(get_db)) -> AutomobileService:
    return AutomobileService(db)
