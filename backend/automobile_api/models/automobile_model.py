from sqlalchemy import Column, Integer, String
from ..core.database import Base

class Automobile(Base):
    """
    A single automobile record. Only the id is required; VIN is not unique.
    """
    __tablename__ = "automobiles"
    # Keep ids from being reused after deletes on SQLite too
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    make = Column(String(50))
    model = Column(String(50))
    year = Column(Integer)
    vin = Column(String(50))
