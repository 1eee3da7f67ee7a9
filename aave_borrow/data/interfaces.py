"""Value types shared by the on-chain client and the borrow cycle."""

from dataclasses import dataclass

from aave_borrow.data.constants import DAI_DECIMALS


@dataclass(frozen=True)
class NetworkConfig:
    """Contract addresses for one chain id."""

    name: str
    weth_token: str
    lending_pool_addresses_provider: str
    dai_eth_price_feed: str
    dai_token: str
    dai_decimals: int = DAI_DECIMALS


@dataclass(frozen=True)
class AccountSnapshot:
    """Result of ``getUserAccountData`` for one user.

    Amounts are in base-currency (ETH) wei.
    """

    total_collateral: int
    total_debt: int
    available_borrows: int
    current_liquidation_threshold: int = 0  # bps
    ltv: int = 0  # bps
    health_factor: int = 0  # 1e18 fixed point


@dataclass(frozen=True)
class PriceQuote:
    """Latest answer of a Chainlink aggregator."""

    answer: int
    decimals: int


@dataclass(frozen=True)
class BorrowCycleResult:
    """Amounts moved and account state observed during one cycle."""

    deposited: int
    borrowed: int
    price: PriceQuote
    after_deposit: AccountSnapshot
    after_borrow: AccountSnapshot
    after_repay: AccountSnapshot
