"""
Wallet Registry — wallet ownership registration service.

Serves a registration page that connects a browser wallet, collects two
signed challenge messages, and submits them to POST /register. The server
recovers the signer, rejects duplicates, and appends the record to a store.
"""

__version__ = "0.1.0"
