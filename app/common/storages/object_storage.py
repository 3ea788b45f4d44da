import asyncio
import typing as tp

from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.common.logger import MessengerLogger
from app.domain.schemas.healthcheck import ObjectStorageHealth
from app.settings.config import StorageSettings


def client_config(timeout: float) -> Config:
    """Конфиг клиента S3, ограниченный таймаутом проверки.

    Повторы отключены: один HTTP-запрос живёт не дольше timeout.
    """
    return Config(
        # path-style обязателен для MinIO
        s3={"addressing_style": "path"},
        connect_timeout=timeout,
        read_timeout=timeout,
        retries={"total_max_attempts": 1},
    )


class ObjectStorage:
    """Объектное хранилище S3/MinIO"""

    def __init__(self, client: tp.Any, config: StorageSettings, logger: MessengerLogger):
        self.client = client
        self.config = config
        self.logger = logger

    def _test_connection(self) -> None:
        """Проверка соединения через ListBuckets"""
        try:
            self.client.list_buckets()
        except (BotoCoreError, ClientError) as e:
            self.logger.error(f"Storage connection failed: {e}")
            raise ConnectionError("Failed to connect to storage service") from e

    def _bucket_exists(self, bucket: str) -> bool:
        """Проверка существования бакета"""
        try:
            self.client.head_bucket(Bucket=bucket)
        except ClientError as e:
            status_code = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            error_code = e.response.get("Error", {}).get("Code")
            if status_code == 404 or error_code in ("404", "NotFound", "NoSuchBucket"):
                return False
            if status_code == 403:
                self.logger.warning(f"Bucket {bucket} exists but access denied")
                return True
            raise
        return True

    def _health_check(self) -> ObjectStorageHealth:
        self._test_connection()
        if not self._bucket_exists(self.config.bucket):
            return ObjectStorageHealth(
                healthy=False, message=f"Bucket {self.config.bucket} does not exist"
            )
        return ObjectStorageHealth(healthy=True, message="Storage service is healthy")

    async def health_check(self) -> ObjectStorageHealth:
        """Проверка здоровья хранилища.

        Вызовы boto3 блокирующие, поэтому выполняются в отдельном потоке.
        Поток, брошенный по таймауту, ограничен таймаутами клиента.
        """
        return await asyncio.to_thread(self._health_check)

    def get_storage_info(self) -> dict[str, tp.Any]:
        """Информация о хранилище"""
        return {
            "type": "MinIO" if "minio" in self.config.endpoint.lower() else "S3",
            "bucket": self.config.bucket,
            "region": self.config.region,
            "endpoint": self.config.endpoint,
        }
