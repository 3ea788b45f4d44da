from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.settings.config import PostgresSettings


class Database:
    """Вспомогательный класс для работы с БД"""

    def __init__(self, config: PostgresSettings):
        self.engine = create_async_engine(url=str(config.dsn), echo=config.echo)
        self.replica_engine: AsyncEngine | None = None
        if config.replica_dsn is not None:
            self.replica_engine = create_async_engine(
                url=str(config.replica_dsn), echo=config.echo
            )

    @property
    def has_replica(self) -> bool:
        """Настроена ли реплика для чтения"""
        return self.replica_engine is not None

    async def test_connection(self) -> bool:
        """Проверка соединения с основной БД и, если настроена, с репликой.

        Ошибка драйвера пробрасывается как ConnectionError с указанием,
        какая из баз (primary или replica) недоступна.
        """
        engines = [("primary", self.engine)]
        if self.replica_engine is not None:
            engines.append(("replica", self.replica_engine))

        for role, engine in engines:
            try:
                async with engine.connect() as connection:
                    result = await connection.scalar(text("SELECT 1"))
            except Exception as e:
                raise ConnectionError(f"{role}: {e}") from e
            if result != 1:
                return False
        return True

    async def dispose(self) -> None:
        """Закрытие пулов соединений"""
        await self.engine.dispose()
        if self.replica_engine is not None:
            await self.replica_engine.dispose()
