import typing as tp

from pydantic import (
    PostgresDsn,
    RedisDsn,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvBaseSettings(BaseSettings):
    """Базовый класс для прокидывания настроек из .env."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class AppSettings(EnvBaseSettings):
    """Настройки приложения FastAPI."""

    host: str = "0.0.0.0"
    port: int = 3000
    workers_num: int = 1
    prefix: str = ""

    logs_path: str | None = None
    logs_access_path: str | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="app_")


class PostgresSettings(EnvBaseSettings):
    """Настройки Postgres"""

    engine: str = "postgresql"
    host: str = "localhost"
    port: int = 5432
    user: str = "messenger"
    password: str = "messenger"
    db: str = "messenger"
    echo: bool = False
    dsn: PostgresDsn | str | None = None
    replica_dsn: PostgresDsn | str | None = None

    @model_validator(mode="after")
    def assemble_db_connection(self) -> tp.Self:
        """Сборка Postgres DSN"""
        if self.dsn is None:
            self.dsn = str(
                PostgresDsn.build(
                    scheme=self.engine + "+asyncpg",
                    username=self.user,
                    password=self.password,
                    host=self.host,
                    port=self.port,
                    path=f"{self.db}",
                )
            )
        return self

    model_config = SettingsConfigDict(env_prefix="postgres_")


class RedisSettings(EnvBaseSettings):
    """Настройки Redis"""

    hostname: str = "localhost"
    port: int = 6379
    database: int = 0
    dsn: RedisDsn | str | None = None

    @model_validator(mode="after")
    def assemble_redis_connection(self) -> tp.Self:
        """Сборка Redis DSN"""
        if self.dsn is None:
            self.dsn = str(
                RedisDsn.build(
                    scheme="redis",
                    host=self.hostname,
                    port=self.port,
                    path=f"{self.database}",
                )
            )
        return self

    model_config = SettingsConfigDict(env_prefix="redis_")


class StorageSettings(EnvBaseSettings):
    """Настройки объектного хранилища S3/MinIO"""

    endpoint: str = "http://localhost:9000"
    access_key: str = "minioadmin"
    secret_key: str = "minioadmin"
    bucket: str = "messenger"
    region: str = "us-east-1"

    @field_validator("bucket")
    @classmethod
    def validate_bucket(cls, v: str) -> str:
        """Валидация имени бакета"""
        if not 3 <= len(v) <= 63:
            raise ValueError("Имя бакета должно быть длиной от 3 до 63 символов")
        return v

    model_config = SettingsConfigDict(env_prefix="storage_")


class HealthCheckSettings(EnvBaseSettings):
    """Настройки проверок здоровья"""

    timeout_per_probe: float = 5.0

    @field_validator("timeout_per_probe")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Таймаут должен быть положительным"""
        if v <= 0:
            raise ValueError("timeout_per_probe должен быть больше нуля")
        return v

    model_config = SettingsConfigDict(env_prefix="health_")


class SlowAPISettings(EnvBaseSettings):
    """Настройки slowapi лимитов"""

    default: str = "100/minute"

    model_config = SettingsConfigDict(env_prefix="slowapi_limit_")


class Settings(EnvBaseSettings):
    """Настройки проекта."""

    app: AppSettings = AppSettings()
    database: PostgresSettings = PostgresSettings()
    redis: RedisSettings = RedisSettings()
    storage: StorageSettings = StorageSettings()
    health: HealthCheckSettings = HealthCheckSettings()
    slowapi: SlowAPISettings = SlowAPISettings()


settings = Settings()
