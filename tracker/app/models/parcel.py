"""
Parcel database model.

One row per tracked shipment in the ``parcel`` table.
"""

from sqlalchemy import Column, Integer, Text
from tracker.app.db.session import Base


class ParcelRecord(Base):
    """
    Persisted parcel row.
    
    ``number`` is assigned by the database on insert. ``created_at`` is an
    RFC3339 string supplied by the caller and stored verbatim.
    """
    __tablename__ = "parcel"
    # Numbers of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Ownership
    client = Column(Integer, nullable=False, index=True)
    
    # Delivery information
    status = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    
    # Timestamps
    created_at = Column(Text, nullable=False)
    
    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')>"
