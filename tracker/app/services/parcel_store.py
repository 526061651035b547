"""
Parcel store.

Data-access object over the ``parcel`` table. The session is supplied and
owned by the caller; database errors are propagated unchanged.
"""

import logging
from typing import List

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.app.models.parcel import ParcelRecord
from tracker.app.schemas.parcel import Parcel

logger = logging.getLogger("tracker")


class ParcelStore:
    """
    Add, fetch, list, update and delete parcels through one session.
    
    Writes commit. Reads autobegin a transaction that is left open; the
    session belongs to the caller, who ends it with commit, rollback or close.
    On file-backed SQLite an open read transaction blocks other writers.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, parcel: Parcel) -> int:
        """
        Insert a parcel and return its newly assigned number.
        
        ``parcel.number`` is ignored.
        """
        record = ParcelRecord(
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        try:
            self.db.add(record)
            await self.db.commit()
        except SQLAlchemyError:
            await self._rollback("add", client=parcel.client)
            raise

        logger.debug("Parcel added", extra={"number": record.number, "client": record.client})
        return record.number

    async def get(self, number: int) -> Parcel:
        """Return the parcel with ``number``, or ``Parcel()`` when there is none."""
        query = (
            select(ParcelRecord)
            .where(ParcelRecord.number == number)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        record = result.scalar_one_or_none()
        if record is None:
            return Parcel()
        return Parcel.model_validate(record)

    async def delete(self, number: int) -> None:
        """Delete the parcel with ``number``. Missing parcels are not an error."""
        await self._write(
            "delete",
            delete(ParcelRecord).where(ParcelRecord.number == number),
            number=number,
        )

    async def set_address(self, number: int, address: str) -> None:
        await self._write(
            "set_address",
            update(ParcelRecord).where(ParcelRecord.number == number).values(address=address),
            number=number,
        )

    async def set_status(self, number: int, status: str) -> None:
        # Any label is accepted; ParcelStatus members are stored as their value
        status = Parcel(status=status).status
        await self._write(
            "set_status",
            update(ParcelRecord).where(ParcelRecord.number == number).values(status=status),
            number=number,
        )

    async def get_by_client(self, client: int) -> List[Parcel]:
        """Return every parcel owned by ``client`` in storage order."""
        query = (
            select(ParcelRecord)
            .where(ParcelRecord.client == client)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return [Parcel.model_validate(record) for record in result.scalars().all()]

    async def _write(self, operation: str, statement, **context) -> None:
        try:
            await self.db.execute(statement)
            await self.db.commit()
        except SQLAlchemyError:
            await self._rollback(operation, **context)
            raise
        logger.debug("Parcel %s", operation, extra=context)

    async def _rollback(self, operation: str, **context) -> None:
        logger.error("Parcel %s failed", operation, extra=context, exc_info=True)
        await self.db.rollback()
