"""Pull a transaction id out of whatever the user pasted (hash, explorer link...)."""

import re

from txexplain.domain.enums import LedgerFamily, ledger_family

EVM_TX_HASH_RE = re.compile(r"0x[0-9a-fA-F]{64}")
# Sui digests are base58-encoded 32 bytes
SUI_DIGEST_RE = re.compile(r"(?<![1-9A-HJ-NP-Za-km-z])[1-9A-HJ-NP-Za-km-z]{43,44}(?![1-9A-HJ-NP-Za-km-z])")
EVM_TX_HASH_LEN = 66


def extract_tx_hash(text: str | None) -> str | None:
    """First 0x-prefixed 32-byte hex hash in the text; else the first 66 chars of a 0x string."""
    if not isinstance(text, str):
        return None
    match = EVM_TX_HASH_RE.search(text)
    if match:
        return match.group(0)
    trimmed = text.strip()
    if trimmed.startswith("0x") and len(trimmed) >= EVM_TX_HASH_LEN:
        return trimmed[:EVM_TX_HASH_LEN]
    return None


def extract_sui_digest(text: str | None) -> str | None:
    if not isinstance(text, str):
        return None
    match = SUI_DIGEST_RE.search(text)
    return match.group(0) if match else None


def extract_tx_id(text: str | None, chain: str) -> str | None:
    if ledger_family(chain) == LedgerFamily.OBJECT:
        return extract_sui_digest(text)
    return extract_tx_hash(text)
