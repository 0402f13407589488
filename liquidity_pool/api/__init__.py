"""HTTP API over the pool ledger."""
