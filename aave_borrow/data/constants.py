"""Asset identifiers and protocol constants."""

from decimal import Decimal

# Decimals
WETH_DECIMALS = 18
DAI_DECIMALS = 18
# Aave V2 account data is denominated in ETH wei
BASE_CURRENCY_DECIMALS = 18

# Lending pool call arguments
REFERRAL_CODE = 0
VARIABLE_RATE_MODE = 2  # Stable rate mode is disabled on the pool

# Fraction of available borrows actually requested
BORROW_SAFETY_MARGIN = Decimal("0.95")

# Default collateral: 0.02 ETH
AMOUNT = 2 * 10**16

# Seconds to wait for a transaction receipt
DEFAULT_TX_TIMEOUT = 120.0

DEFAULT_RPC_URL = "http://127.0.0.1:8545"
