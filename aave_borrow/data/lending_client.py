"""On-chain client submitting Aave V2 lending pool transactions via web3.py."""

from __future__ import annotations

import logging
from typing import Any

from eth_account import Account
from web3 import Web3

from aave_borrow.data.constants import (
    BASE_CURRENCY_DECIMALS,
    DEFAULT_TX_TIMEOUT,
    REFERRAL_CODE,
    VARIABLE_RATE_MODE,
    WETH_DECIMALS,
)
from aave_borrow.data.contracts import (
    ADDRESSES_PROVIDER_ABI,
    CHAINLINK_FEED_ABI,
    ERC20_ABI,
    LENDING_POOL_ABI,
    WETH_ABI,
)
from aave_borrow.data.errors import ConfigurationError, TransactionRevertedError
from aave_borrow.data.interfaces import AccountSnapshot, PriceQuote
from aave_borrow.protocol.amounts import to_decimal

logger = logging.getLogger(__name__)


class LendingClient:
    """Signer-bound access to WETH, ERC-20 tokens, the lending pool and price feeds.

    Parameters
    ----------
    w3 : Web3
        Connected web3 instance.
    private_key : str | None
        Hex private key used to sign transactions locally.  When omitted the
        node's first account is used and the node signs (local fork).
    tx_timeout : float
        Seconds to wait for each transaction receipt.
    """

    def __init__(
        self,
        w3: Any,
        private_key: str | None = None,
        tx_timeout: float = DEFAULT_TX_TIMEOUT,
    ) -> None:
        self._w3 = w3
        self._tx_timeout = tx_timeout

        if private_key:
            self._local_account = Account.from_key(private_key)
            self.address = self._local_account.address
        else:
            self._local_account = None
            accounts = w3.eth.accounts
            if not accounts:
                raise ConfigurationError("No PRIVATE_KEY and the node exposes no accounts")
            self.address = accounts[0]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _contract(self, address: str, abi: list[dict]) -> Any:
        return self._w3.eth.contract(
            address=self._w3.to_checksum_address(address),
            abi=abi,
        )

    def _send(self, fn: Any, label: str, value: int = 0) -> Any:
        """Submit a contract call from the signer and wait for one confirmation."""
        params: dict[str, Any] = {"from": self.address}
        if value:
            params["value"] = value

        if self._local_account is not None:
            params["nonce"] = self._w3.eth.get_transaction_count(self.address)
            tx = fn.build_transaction(params)
            signed = self._local_account.sign_transaction(tx)
            tx_hash = self._w3.eth.send_raw_transaction(signed.raw_transaction)
        else:
            tx_hash = fn.transact(params)

        receipt = self._w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self._tx_timeout
        )
        if receipt["status"] != 1:
            raise TransactionRevertedError(Web3.to_hex(tx_hash), label)
        logger.debug("%s confirmed in block %s", label, receipt.get("blockNumber"))
        return receipt

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def get_weth(self, weth_token: str, amount: int) -> Any:
        """Wrap ``amount`` wei of native ETH into WETH."""
        weth = self._contract(weth_token, WETH_ABI)
        receipt = self._send(weth.functions.deposit(), "WETH deposit", value=amount)
        logger.info("Got %s WETH", to_decimal(amount, WETH_DECIMALS))
        return receipt

    def approve_erc20(self, token: str, spender: str, amount: int) -> Any:
        """Approve ``spender`` to pull up to ``amount`` of ``token``."""
        erc20 = self._contract(token, ERC20_ABI)
        receipt = self._send(
            erc20.functions.approve(self._w3.to_checksum_address(spender), amount),
            "approve",
        )
        logger.info("Approved!")
        return receipt

    # ------------------------------------------------------------------
    # Lending pool
    # ------------------------------------------------------------------

    def get_lending_pool(self, addresses_provider: str) -> Any:
        """Resolve the current lending pool through the addresses provider."""
        provider = self._contract(addresses_provider, ADDRESSES_PROVIDER_ABI)
        pool_address = provider.functions.getLendingPool().call()
        logger.info("Lending pool at %s", pool_address)
        return self._contract(pool_address, LENDING_POOL_ABI)

    def deposit(self, pool: Any, asset: str, amount: int) -> Any:
        logger.info("Depositing WETH...")
        receipt = self._send(
            pool.functions.deposit(
                self._w3.to_checksum_address(asset), amount, self.address, REFERRAL_CODE
            ),
            "deposit",
        )
        logger.info("Deposited!")
        return receipt

    def get_borrow_user_data(self, pool: Any) -> AccountSnapshot:
        """Read and log the signer's collateral, debt and borrowing power."""
        data = pool.functions.getUserAccountData(self.address).call()
        snapshot = AccountSnapshot(
            total_collateral=data[0],
            total_debt=data[1],
            available_borrows=data[2],
            current_liquidation_threshold=data[3],
            ltv=data[4],
            health_factor=data[5],
        )
        logger.info(
            "You have %s worth of ETH deposited.",
            to_decimal(snapshot.total_collateral, BASE_CURRENCY_DECIMALS),
        )
        logger.info(
            "You have %s worth of ETH borrowed.",
            to_decimal(snapshot.total_debt, BASE_CURRENCY_DECIMALS),
        )
        logger.info(
            "You can borrow %s worth of ETH.",
            to_decimal(snapshot.available_borrows, BASE_CURRENCY_DECIMALS),
        )
        return snapshot

    def borrow(self, pool: Any, asset: str, amount: int) -> Any:
        """Take a variable-rate loan of ``amount`` of ``asset``."""
        receipt = self._send(
            pool.functions.borrow(
                self._w3.to_checksum_address(asset),
                amount,
                VARIABLE_RATE_MODE,
                REFERRAL_CODE,
                self.address,
            ),
            "borrow",
        )
        logger.info("You've borrowed!")
        return receipt

    def repay(self, pool: Any, asset: str, amount: int) -> Any:
        """Approve the pool and repay ``amount`` of a variable-rate loan."""
        self.approve_erc20(asset, pool.address, amount)
        receipt = self._send(
            pool.functions.repay(
                self._w3.to_checksum_address(asset),
                amount,
                VARIABLE_RATE_MODE,
                self.address,
            ),
            "repay",
        )
        logger.info("Repaid!")
        return receipt

    # ------------------------------------------------------------------
    # Price feeds
    # ------------------------------------------------------------------

    def get_asset_price(self, price_feed: str) -> PriceQuote:
        """Latest answer of a Chainlink aggregator, with its decimals."""
        feed = self._contract(price_feed, CHAINLINK_FEED_ABI)
        round_data = feed.functions.latestRoundData().call()
        decimals = feed.functions.decimals().call()
        quote = PriceQuote(answer=round_data[1], decimals=decimals)
        logger.info("The DAI/ETH price is %s", to_decimal(quote.answer, quote.decimals))
        return quote

    # ------------------------------------------------------------------
    # Node
    # ------------------------------------------------------------------

    @property
    def chain_id(self) -> int:
        return self._w3.eth.chain_id

    @property
    def is_connected(self) -> bool:
        """Check if the Web3 provider is connected."""
        try:
            return self._w3.is_connected()
        except Exception:
            return False
