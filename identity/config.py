# identity/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경 변수(IDENTITY_*) 또는 .env 파일에서 읽어오는 애플리케이션 설정입니다."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IDENTITY_",
        extra="ignore",
    )

    # 데이터베이스
    database_url: str = "sqlite:///./identity.db"
    sql_echo: bool = False

    # 마이그레이션 컨텍스트 (dev / uat / prod)
    environment: Literal["dev", "uat", "prod"] = "dev"

    # 로깅
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # 시드 사용자에게 기록되는 비밀번호 해시. 기본값 '!'는 어떤 해시와도 일치하지 않습니다.
    seed_password_hash: str = "!"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
