"""Command-line entry point: run one deposit/borrow/repay cycle."""

from __future__ import annotations

import logging
import os
import sys

from aave_borrow.data.client_factory import create_client
from aave_borrow.data.config import get_network_config, load_config
from aave_borrow.logging_setup import configure_logging
from aave_borrow.position.borrow_cycle import run_borrow_cycle

logger = logging.getLogger(__name__)


def run() -> None:
    """Load configuration, connect and run the cycle.  Errors propagate."""
    config = load_config()
    configure_logging(config.log_level)

    client = create_client(
        rpc_url=config.rpc_url,
        private_key=config.private_key,
        tx_timeout=config.tx_timeout,
    )
    network = get_network_config(client.chain_id)
    logger.info("Running on %s", network.name)

    run_borrow_cycle(client, network, config.deposit_amount)


def main() -> None:
    """Entry point.  Exits 0 on success, 1 on any error."""
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
    try:
        run()
    except Exception:
        logger.exception("Borrow cycle failed")
        sys.exit(1)
    sys.exit(0)
