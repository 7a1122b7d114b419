"""Connection, transaction and token-unit helpers shared by the contract wrappers."""
