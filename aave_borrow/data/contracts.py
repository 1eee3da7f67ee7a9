"""Contract addresses and minimal ABIs for the Aave V2 borrow cycle."""

# ---------------------------------------------------------------------------
# Ethereum mainnet addresses
# ---------------------------------------------------------------------------
WETH_TOKEN = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
DAI_TOKEN = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
LENDING_POOL_ADDRESSES_PROVIDER = "0xB53C1a33016B2DC2fF3653530bfF1848a515c8c5"
CHAINLINK_DAI_ETH_FEED = "0x773616E4d11A78F511299002da57A0a94577F1f4"

# ---------------------------------------------------------------------------
# Per-chain address table (chain id -> fields of NetworkConfig)
# ---------------------------------------------------------------------------
NETWORK_CONFIG: dict[int, dict[str, str]] = {
    1: {
        "name": "mainnet",
        "weth_token": WETH_TOKEN,
        "lending_pool_addresses_provider": LENDING_POOL_ADDRESSES_PROVIDER,
        "dai_eth_price_feed": CHAINLINK_DAI_ETH_FEED,
        "dai_token": DAI_TOKEN,
    },
    # Local Hardhat / Anvil node forking mainnet
    31337: {
        "name": "localhost",
        "weth_token": WETH_TOKEN,
        "lending_pool_addresses_provider": LENDING_POOL_ADDRESSES_PROVIDER,
        "dai_eth_price_feed": CHAINLINK_DAI_ETH_FEED,
        "dai_token": DAI_TOKEN,
    },
}

# ---------------------------------------------------------------------------
# Minimal ABIs: only the functions we call
# ---------------------------------------------------------------------------

ERC20_ABI = [
    {
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "name": "approve",
        "outputs": [{"name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

WETH_ABI = ERC20_ABI + [
    {
        "inputs": [],
        "name": "deposit",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function",
    },
]

ADDRESSES_PROVIDER_ABI = [
    {
        "inputs": [],
        "name": "getLendingPool",
        "outputs": [{"name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
]

LENDING_POOL_ABI = [
    {
        "inputs": [
            {"name": "asset", "type": "address"},
            {"name": "amount", "type": "uint256"},
            {"name": "onBehalfOf", "type": "address"},
            {"name": "referralCode", "type": "uint16"},
        ],
        "name": "deposit",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "asset", "type": "address"},
            {"name": "amount", "type": "uint256"},
            {"name": "interestRateMode", "type": "uint256"},
            {"name": "referralCode", "type": "uint16"},
            {"name": "onBehalfOf", "type": "address"},
        ],
        "name": "borrow",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "asset", "type": "address"},
            {"name": "amount", "type": "uint256"},
            {"name": "rateMode", "type": "uint256"},
            {"name": "onBehalfOf", "type": "address"},
        ],
        "name": "repay",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"name": "user", "type": "address"}],
        "name": "getUserAccountData",
        "outputs": [
            {"name": "totalCollateralETH", "type": "uint256"},
            {"name": "totalDebtETH", "type": "uint256"},
            {"name": "availableBorrowsETH", "type": "uint256"},
            {"name": "currentLiquidationThreshold", "type": "uint256"},
            {"name": "ltv", "type": "uint256"},
            {"name": "healthFactor", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]

CHAINLINK_FEED_ABI = [
    {
        "inputs": [],
        "name": "latestRoundData",
        "outputs": [
            {"name": "roundId", "type": "uint80"},
            {"name": "answer", "type": "int256"},
            {"name": "startedAt", "type": "uint256"},
            {"name": "updatedAt", "type": "uint256"},
            {"name": "answeredInRound", "type": "uint80"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
]
