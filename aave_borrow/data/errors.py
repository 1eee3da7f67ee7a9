"""Errors raised by the borrow cycle."""


class ConfigurationError(ValueError):
    """Missing or invalid configuration (env vars, unknown chain id)."""


class TransactionRevertedError(RuntimeError):
    """A transaction was mined with a failed status."""

    def __init__(self, tx_hash: str, label: str) -> None:
        self.tx_hash = tx_hash
        self.label = label
        super().__init__(f"{label} transaction {tx_hash} reverted")
