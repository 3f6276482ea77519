"""Configuration for the Axios client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://wsalu.axioscloud.it/webservice/AxiosCloud_Ws_Rest.svc"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for the Axios client.

    ``rc4_key`` and ``vendor_token`` are fixed per deployment and shared by
    every request; the frozen dataclass keeps them read-only once loaded.
    """

    rc4_key: str
    vendor_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0  # seconds

    # Optional credentials, used by the CLI
    codice_fiscale: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    # Identifies the mobile app to the vendor
    requested_with: str = "com.axiositalia.re.students"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create configuration from environment variables (and ``.env``)."""
        load_dotenv()

        rc4_key = os.environ.get("AXIOS_RC4_KEY")
        vendor_token = os.environ.get("AXIOS_VENDOR_TOKEN")

        if not rc4_key:
            raise ValueError("AXIOS_RC4_KEY environment variable is required")
        if not vendor_token:
            raise ValueError("AXIOS_VENDOR_TOKEN environment variable is required")

        timeout = os.environ.get("AXIOS_TIMEOUT", "30")
        try:
            timeout_seconds = float(timeout)
        except ValueError:
            raise ValueError(f"AXIOS_TIMEOUT must be a number, got {timeout!r}") from None

        return cls(
            rc4_key=rc4_key,
            vendor_token=vendor_token,
            base_url=os.environ.get("AXIOS_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout_seconds,
            codice_fiscale=os.environ.get("AXIOS_CODICE_FISCALE"),
            username=os.environ.get("AXIOS_USERNAME"),
            password=os.environ.get("AXIOS_PASSWORD"),
        )

    def get_service_url(self, endpoint: str) -> str:
        """Get full URL for a REST endpoint."""
        return f"{self.base_url}/{endpoint}"

    @property
    def has_credentials(self) -> bool:
        return bool(self.codice_fiscale and self.username and self.password)


# Global configuration instance
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the process-wide client configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config


def set_config(config: ClientConfig) -> None:
    """Replace the process-wide client configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Forget the loaded configuration so the next access re-reads the env."""
    global _config
    _config = None
