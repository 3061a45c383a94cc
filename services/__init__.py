"""HTTP clients for the order book, quote aggregator and JSON-RPC node."""
