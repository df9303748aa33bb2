"""
Coinbase assembly helper.

Stratum-style jobs split the coinbase transaction around the extranonce:

    coinbase = coinbase1 + extranonce1 + extranonce2 + coinbase2

BlockBind hashes the assembled transaction; this joins the parts for
callers that hold them separately.
"""

from __future__ import annotations

from core.crypto.hashing import decode_hex


def join_coinbase(
    coinbase1: str,
    extranonce1: str,
    extranonce2: str,
    coinbase2: str,
) -> str:
    """
    Join the coinbase parts into the full transaction hex.

    Each part is checked as hex on its own so an odd-length part is reported
    by name instead of surfacing later as a misaligned transaction.

    Raises:
        InvalidInputException: If any part is not valid even-length hex
    """
    parts = {
        "coinbase1": coinbase1,
        "extranonce1": extranonce1,
        "extranonce2": extranonce2,
        "coinbase2": coinbase2,
    }
    return b"".join(decode_hex(value, name) for name, value in parts.items()).hex()
