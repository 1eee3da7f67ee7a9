"""On-chain access for the Aave V2 borrow cycle: addresses, ABIs, config and the web3 client."""
