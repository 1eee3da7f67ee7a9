"""Deposit → borrow → repay cycle on an Aave V2 lending pool.

Steps, each confirmed before the next is sent:
  1. Wrap ETH → WETH
  2. Approve the pool for WETH, deposit it as collateral
  3. Read borrowing power and the DAI/ETH price
  4. Borrow 95% of the borrowing power in DAI (variable rate)
  5. Approve the pool for DAI, repay the loan
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aave_borrow.data.interfaces import BorrowCycleResult, NetworkConfig
from aave_borrow.protocol.amounts import compute_borrow_amount, to_decimal

if TYPE_CHECKING:
    from aave_borrow.data.lending_client import LendingClient

logger = logging.getLogger(__name__)


def run_borrow_cycle(
    client: LendingClient,
    network: NetworkConfig,
    deposit_amount: int,
) -> BorrowCycleResult:
    """Run one full cycle for the client's signer.

    Any failure propagates; steps already confirmed are not rolled back.
    """
    client.get_weth(network.weth_token, deposit_amount)

    pool = client.get_lending_pool(network.lending_pool_addresses_provider)
    client.approve_erc20(network.weth_token, pool.address, deposit_amount)
    client.deposit(pool, network.weth_token, deposit_amount)

    after_deposit = client.get_borrow_user_data(pool)
    price = client.get_asset_price(network.dai_eth_price_feed)

    amount_to_borrow = compute_borrow_amount(
        after_deposit.available_borrows,
        price.answer,
        price_decimals=price.decimals,
        token_decimals=network.dai_decimals,
    )
    logger.info(
        "You can borrow %s DAI", to_decimal(amount_to_borrow, network.dai_decimals)
    )

    client.borrow(pool, network.dai_token, amount_to_borrow)
    after_borrow = client.get_borrow_user_data(pool)

    client.repay(pool, network.dai_token, amount_to_borrow)
    after_repay = client.get_borrow_user_data(pool)

    return BorrowCycleResult(
        deposited=deposit_amount,
        borrowed=amount_to_borrow,
        price=price,
        after_deposit=after_deposit,
        after_borrow=after_borrow,
        after_repay=after_repay,
    )
