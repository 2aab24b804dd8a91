from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """應用程式設定"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    # NETIM API Configuration
    netim_username: str = Field(default="", description="NETIM Reseller ID")
    netim_password: str = Field(default="", description="NETIM Reseller Password")
    netim_sandbox: bool = Field(default=False, description="Use the OTE (sandbox) endpoint")
    netim_production_url: str = Field(default="https://api.netim.com/2.0/rpc")
    netim_sandbox_url: str = Field(default="https://oteapi.netim.com/2.0/rpc")
    netim_default_language: str = Field(default="EN", description="Session language (EN / FR)")
    netim_client_version: Optional[str] = Field(default=None, description="Version string sent with login")
    netim_sync_delay: Optional[int] = Field(default=25, description="syncDelay session preference")
    netim_request_timeout: Optional[float] = Field(default=None, description="HTTP timeout in seconds")

    # Normalization
    normalization_fallback: str = Field(
        default="keep_input",
        description="Country/state no-match policy: keep_input / first_entry"
    )

    # Logging
    log_api_requests: bool = Field(default=False, description="Log every API request/response")

    # Development
    debug: bool = Field(default=False)
    verbose_errors: bool = Field(default=False, description="Show detailed technical errors (for debugging)")

    @property
    def netim_api_url(self) -> str:
        return self.netim_sandbox_url if self.netim_sandbox else self.netim_production_url


# 全域設定實例
settings = Settings()
