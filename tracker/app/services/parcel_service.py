"""
Parcel registration helpers.

Small conveniences on top of ParcelStore for building and printing parcels.
"""

from datetime import datetime, timezone
from typing import Optional

from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel
from tracker.app.services.parcel_store import ParcelStore

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def new_parcel(
    client: int,
    status: str = ParcelStatus.REGISTERED,
    address: str = "",
    now: Optional[datetime] = None,
) -> Parcel:
    """
    Build an unsaved parcel stamped with the current UTC time.
    
    Args:
        client: Owning client identifier
        status: Initial status label
        address: Delivery address
        now: Creation time override, converted to UTC; naive values are taken as UTC
        
    Returns:
        Parcel with ``number`` left at 0
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return Parcel(
        client=client,
        status=status,
        address=address,
        created_at=now.strftime(RFC3339_FORMAT),
    )


async def register_parcel(store: ParcelStore, client: int, address: str) -> Parcel:
    """Create a ``registered`` parcel and return it with its assigned number."""
    parcel = new_parcel(client, address=address)
    parcel.number = await store.add(parcel)
    return parcel


def format_parcel(parcel: Parcel) -> str:
    return (
        f"Parcel #{parcel.number} for client {parcel.client}: "
        f"address {parcel.address}, status {parcel.status}, registered {parcel.created_at}"
    )
