from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    location_place_index_name: str
    location_region: str = "us-west-2"
    location_transport: Literal["rest", "sdk"] = "rest"
    location_api_key: str = ""
    location_map_name: str = ""
    location_endpoint: str = ""

    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_session_token: str = ""

    lookup_max_results: int = Field(default=5, ge=1, le=50)
    connect_timeout: float = 10.0
    read_timeout: float = 10.0
    max_retries: int = Field(default=3, ge=0)

    startup_check: bool = True
    log_level: str = "INFO"

    @model_validator(mode="after")
    def require_credentials(self) -> "Settings":
        if not self.location_place_index_name.strip():
            raise ValueError("location_place_index_name must not be blank")
        if self.location_transport == "rest" and not self.location_api_key.strip():
            raise ValueError("location_api_key is required for the rest transport")
        if self.location_transport == "sdk" and not (
            self.aws_access_key_id.strip() and self.aws_secret_access_key.strip()
        ):
            raise ValueError(
                "aws_access_key_id and aws_secret_access_key are required for the sdk transport"
            )
        return self

    @property
    def map_enabled(self) -> bool:
        return bool(self.location_map_name and self.location_api_key)
