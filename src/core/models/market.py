"""MarketParams and MarketState data models."""

from dataclasses import dataclass

from web3 import Web3

from src.core.constants import WAD

CONTRACT_ID_LENGTH = 32  # bytes


def contract_id_bytes(contract_id: str) -> bytes:
    """
    Decode a hex contract id into its raw 32 bytes.

    Args:
        contract_id: Hex string, with or without a 0x prefix

    Returns:
        The decoded bytes

    Raises:
        ValueError: If the id is not hex or not 32 bytes long
    """
    try:
        raw = Web3.to_bytes(hexstr=contract_id)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid contract id: {contract_id!r}") from e

    if len(raw) != CONTRACT_ID_LENGTH:
        raise ValueError(
            f"Invalid contract id length: {contract_id!r} "
            f"({len(raw)} bytes, expected {CONTRACT_ID_LENGTH})"
        )
    return raw


@dataclass(frozen=True)
class MarketParams:
    """Immutable parameters defining a lending market."""

    loan_token: str  # Loan token contract id
    collateral_token: str  # Collateral token contract id
    oracle: str  # Oracle contract id
    interest_rate_model: str  # Interest rate model contract id
    loan_to_value: int  # WAD fraction, 0 < ltv <= 1e18

    def __post_init__(self):
        for name in ("loan_token", "collateral_token", "oracle", "interest_rate_model"):
            contract_id_bytes(getattr(self, name))

        if not 0 < self.loan_to_value <= WAD:
            raise ValueError(f"Invalid loan to value: {self.loan_to_value}")


@dataclass
class MarketState:
    """Totals of a lending market, owned by the lending protocol."""

    total_supply_assets: int
    total_supply_shares: int
    total_borrow_assets: int
    total_borrow_shares: int
    last_update: int  # Unix timestamp in seconds
    fee: int = 0  # WAD fraction

    def __post_init__(self):
        for name in (
            "total_supply_assets",
            "total_supply_shares",
            "total_borrow_assets",
            "total_borrow_shares",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    @property
    def utilization(self) -> int:
        """Borrowed over supplied assets as a WAD fraction (0 with no supply)."""
        if self.total_supply_assets == 0:
            return 0
        return self.total_borrow_assets * WAD // self.total_supply_assets
