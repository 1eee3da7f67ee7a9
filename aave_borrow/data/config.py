"""Run configuration: env vars (and a local .env) plus the network table."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from aave_borrow.data.constants import AMOUNT, DEFAULT_RPC_URL, DEFAULT_TX_TIMEOUT
from aave_borrow.data.contracts import NETWORK_CONFIG
from aave_borrow.data.errors import ConfigurationError
from aave_borrow.data.interfaces import NetworkConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """Settings for one borrow cycle."""

    rpc_url: str = DEFAULT_RPC_URL
    private_key: str | None = None
    deposit_amount: int = AMOUNT
    tx_timeout: float = DEFAULT_TX_TIMEOUT
    log_level: str = "INFO"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def load_config() -> RunConfig:
    """Build a :class:`RunConfig` from the environment.

    A ``.env`` file in the working directory is loaded first; variables
    already set in the environment take precedence.

    Recognised variables: ``ETH_RPC_URL``, ``PRIVATE_KEY``,
    ``DEPOSIT_AMOUNT_WEI``, ``TX_TIMEOUT`` and ``LOG_LEVEL``.
    """
    load_dotenv()

    cfg = RunConfig(
        rpc_url=os.environ.get("ETH_RPC_URL") or DEFAULT_RPC_URL,
        private_key=os.environ.get("PRIVATE_KEY") or None,
        deposit_amount=_env_int("DEPOSIT_AMOUNT_WEI", AMOUNT),
        tx_timeout=_env_float("TX_TIMEOUT", DEFAULT_TX_TIMEOUT),
        log_level=os.environ.get("LOG_LEVEL") or "INFO",
    )
    logger.debug("Loaded configuration for RPC %s", cfg.rpc_url)
    return cfg


def get_network_config(chain_id: int) -> NetworkConfig:
    """Look up contract addresses for *chain_id*."""
    raw = NETWORK_CONFIG.get(chain_id)
    if raw is None:
        raise ConfigurationError(f"No network configuration for chain id {chain_id}")
    return NetworkConfig(**raw)
