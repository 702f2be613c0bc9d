from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    AWS_REGION: str = Field(default="us-east-1", description="AWS region of the users table")
    USERS_TABLE: str = Field(default="users", description="DynamoDB table holding user records")
    USER_STORE: Literal["dynamodb", "memory"] = Field(
        default="dynamodb",
        description="User store backend: 'dynamodb' (production) or 'memory' (testing)"
    )
    DYNAMODB_ENDPOINT_URL: Optional[str] = Field(
        default=None,
        description="Optional DynamoDB endpoint override, e.g. http://localhost:8000 for DynamoDB Local"
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", description="Log level")

    @field_validator("USERS_TABLE")
    @classmethod
    def validate_table_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("USERS_TABLE must not be empty")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


settings = Settings()
