import asyncio
import sys

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from tracker.app.core.config import settings
from tracker.app.db.session import init_models
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.services.parcel_service import format_parcel, register_parcel
from tracker.app.services.parcel_store import ParcelStore

CLIENT_ID = 1000


def open_sessions():
    engine = create_async_engine(settings.database_url, echo=settings.db_echo)
    return engine, async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def run_verification():
    print(f"Testing persistence against: {settings.database_url}")

    # 1. First connection: create table and register a parcel
    print("\n--- [Step 1] Registering Parcel ---")
    engine, Session = open_sessions()
    try:
        await init_models(engine)
        async with Session() as session:
            store = ParcelStore(session)
            parcel = await register_parcel(store, CLIENT_ID, "Persistence Test St 1")
            print(f"✅ Registered {format_parcel(parcel)}")
            await store.set_status(parcel.number, ParcelStatus.SENT)
            print(f"✅ Updated {format_parcel(await store.get(parcel.number))}")
    finally:
        await engine.dispose()

    # 2. Second connection: the parcel must still be there
    print("\n--- [Step 2] Reconnecting (Verification) ---")
    engine, Session = open_sessions()
    try:
        async with Session() as session:
            store = ParcelStore(session)
            stored = await store.get(parcel.number)
            if stored.number != parcel.number or stored.status != ParcelStatus.SENT:
                print(f"❌ Parcel #{parcel.number} not persisted: {stored!r}")
                return False
            print(f"✅ Found {format_parcel(stored)}")

            print("\n--- [Step 3] Client Parcels ---")
            for client_parcel in await store.get_by_client(CLIENT_ID):
                print(format_parcel(client_parcel))

            print("\n--- [Step 4] Cleaning Up ---")
            await store.delete(parcel.number)
            if (await store.get(parcel.number)).number:
                print("❌ Parcel still present after delete")
                return False
            print("✅ Parcel deleted")
    finally:
        await engine.dispose()

    return True


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(run_verification()) else 1)
