"""Factory for creating a connected LendingClient."""

from __future__ import annotations

import logging
import os

from web3 import Web3

from aave_borrow.data.constants import DEFAULT_TX_TIMEOUT
from aave_borrow.data.errors import ConfigurationError
from aave_borrow.data.lending_client import LendingClient

logger = logging.getLogger(__name__)


def create_client(
    rpc_url: str | None = None,
    private_key: str | None = None,
    tx_timeout: float = DEFAULT_TX_TIMEOUT,
) -> LendingClient:
    """Create a client bound to an RPC node and a signer.

    Parameters
    ----------
    rpc_url : str | None
        Ethereum JSON-RPC URL.  Falls back to the ``ETH_RPC_URL``
        environment variable when not supplied.
    private_key : str | None
        Signer key; the node's first account is used when absent.
    tx_timeout : float
        Seconds to wait for each transaction receipt.
    """
    resolved_url = rpc_url or os.environ.get("ETH_RPC_URL")
    if not resolved_url:
        raise ConfigurationError("No RPC URL provided; set ETH_RPC_URL")

    w3 = Web3(Web3.HTTPProvider(resolved_url))
    client = LendingClient(w3, private_key=private_key, tx_timeout=tx_timeout)
    logger.info("Using account %s via %s", client.address, resolved_url)
    return client
