from upkeep_raffle.config import (
    DEVELOPMENT_CHAINS,
    NetworkConfig,
    RaffleConfig,
    get_network_config,
)
from upkeep_raffle.errors import (
    InsufficientPayment,
    NotOpen,
    PayoutTransferFailed,
    RaffleError,
    UnknownRequest,
    UpkeepNotNeeded,
)
from upkeep_raffle.state import RaffleState, select_winner, upkeep_needed

__all__ = [
    "DEVELOPMENT_CHAINS",
    "NetworkConfig",
    "RaffleConfig",
    "get_network_config",
    "RaffleError",
    "InsufficientPayment",
    "NotOpen",
    "UpkeepNotNeeded",
    "UnknownRequest",
    "PayoutTransferFailed",
    "RaffleState",
    "select_winner",
    "upkeep_needed",
]
