"""Configuration for Simple Webserver"""
import logging
from typing import Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    """Application settings, resolved from SIMPLE_WEBSERVER_* env vars or .env"""

    # Server
    listen: str = ":8082"
    log_level: str = "INFO"

    # Redis backend
    redis: str = ":6379"
    redis_timeout: float = 5.0

    # Kubernetes pod creation
    kube_namespace: str = "default"
    kube_pod_image: str = "nginx:alpine"
    kube_pod_prefix: str = "simple-webserver-"

    # Debug routes read at most this many body bytes (0 disables the cap)
    max_payload_bytes: int = 1024 * 1024

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_WEBSERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    def log_configuration(self):
        logger.info("=" * 60)
        logger.info("Simple Webserver Configuration")
        logger.info("=" * 60)
        logger.info(f"  Listen: {self.listen}")
        logger.info(f"  Redis: {self.redis} (timeout {self.redis_timeout}s)")
        logger.info(f"  Kubernetes namespace: {self.kube_namespace}")
        logger.info(f"  Pod image: {self.kube_pod_image}")
        logger.info(f"  Max payload: {self.max_payload_bytes or 'unlimited'}")
        logger.info("=" * 60)


def split_host_port(address: str, default_host: str, default_port: int) -> Tuple[str, int]:
    """
    Split an address of the form host:port, :port, [v6]:port or host.

    Missing parts are filled from the defaults.
    """
    address = address.strip()
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        port = rest[1:] if rest.startswith(":") else ""
    elif address.count(":") == 1:
        host, _, port = address.partition(":")
    else:
        host, port = address, ""

    if port and not port.isdigit():
        raise ValueError(f"Invalid port in address: {address!r}")

    return host or default_host, int(port) if port else default_port


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
