"""Configuration management for the kubesail-config application."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Config:
    """Application configuration with sensible defaults."""

    # KubeSail registration endpoint
    KUBESAIL_WWW_HOST: str = os.getenv("KUBESAIL_WWW_HOST", "https://kubesail.com").rstrip("/")

    # Kubeconfig location
    KUBECONFIG_PATH: Path = Path(
        os.path.expanduser(os.getenv("KUBECONFIG_PATH", os.path.join("~", ".kube", "config")))
    )

    # Local callback listener
    CALLBACK_HOST: str = os.getenv("CALLBACK_HOST", "127.0.0.1")
    CALLBACK_PORT: int = int(os.getenv("CALLBACK_PORT", "0"))  # 0 = ephemeral

    # Prefix shared by every cluster, user and context this tool writes
    ENTRY_PREFIX: str = "kubesail"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Security
    REDACT_KEYS: tuple = ("token", "cert", "key", "password", "secret")

    @classmethod
    def registration_url(cls, port: int, www_host: Optional[str] = None) -> str:
        """Build the URL the browser is sent to for a listener on ``port``."""
        host = (www_host or cls.KUBESAIL_WWW_HOST).rstrip("/")
        return f"{host}/register?listenPort={port}"
