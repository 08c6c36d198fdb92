from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from .config import settings

# postgresql+asyncpg in deployment; DATABASE_URL may point elsewhere (tests use aiosqlite)
engine = create_async_engine(
    settings.database_url,
    echo=settings.app_env == "dev",
    pool_pre_ping=True,
)

# Objects stay readable after commit so endpoints can serialize them
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

Base = declarative_base()


async def get_db():
    """
    Yield one session per request.

    Repositories only flush; the endpoint commits once its operation has
    succeeded, so an error leaves nothing half-written.
    """
    async with AsyncSessionLocal() as session:
        yield session
