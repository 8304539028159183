from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.logging_reset_notifier import LoggingPasswordResetNotifier
from src.adapter.services.secure_token_generator import SecureTokenGenerator
from src.adapter.services.system_clock import SystemClock
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.clock import Clock
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_notifier import PasswordResetNotifier
from src.app.services.token_generator import TokenGenerator

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

_password_hasher = BcryptPasswordHasher()
_clock = SystemClock()
_token_generator = SecureTokenGenerator()
_reset_notifier = LoggingPasswordResetNotifier()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> PasswordHasher:
    return _password_hasher


def get_clock() -> Clock:
    return _clock


def get_token_generator() -> TokenGenerator:
    return _token_generator


def get_reset_notifier() -> PasswordResetNotifier:
    return _reset_notifier


async def init_db() -> None:
    """Create missing tables on the configured database"""
    import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
