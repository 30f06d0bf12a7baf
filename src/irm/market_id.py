"""Deterministic market identifiers."""

from web3 import Web3

from src.core.models import MarketParams, contract_id_bytes

# Packed encoding of MarketParams, in field order
MARKET_ID_ABI_TYPES = ["bytes32", "bytes32", "bytes32", "bytes32", "uint256"]


def compute_market_id(params: MarketParams) -> str:
    """
    Compute the storage key of a market.

    The id is the keccak-256 digest of the packed encoding of the four
    contract ids followed by the loan to value.

    Args:
        params: Market parameters

    Returns:
        0x-prefixed hex digest
    """
    digest = Web3.solidity_keccak(
        MARKET_ID_ABI_TYPES,
        [
            contract_id_bytes(params.loan_token),
            contract_id_bytes(params.collateral_token),
            contract_id_bytes(params.oracle),
            contract_id_bytes(params.interest_rate_model),
            params.loan_to_value,
        ],
    )
    return Web3.to_hex(digest)
