from redis.asyncio import Redis


class RedisStorage:
    """Хранилище Redis"""

    def __init__(self, client: Redis):
        self.client = client

    async def check_health(self) -> bool:
        """Проверка доступности Redis через PING"""
        return bool(await self.client.ping())
