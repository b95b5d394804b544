"""Constructor arguments for verifying a deployed raffle on a block explorer.

    GOERLI_VERIFY_ARGS were used for the goerli deployment at
    0x45472158E8e8d8df327e60C05e7cBd5256d9A7E8.
"""
from eth_abi import encode
from eth_utils import to_hex

from upkeep_raffle.config import NetworkConfig, RaffleConfig, get_network_config

CONSTRUCTOR_TYPES = ["address", "uint256", "bytes32", "uint64", "uint32", "uint256"]


def verify_args(network_config: NetworkConfig, vrf_coordinator=None, subscription_id=None) -> tuple:
    return network_config.raffle_config(vrf_coordinator, subscription_id).constructor_args()


def encode_constructor_args(raffle_config: RaffleConfig) -> str:
    """ABI-encoded constructor arguments, as explorers expect them (no 0x)."""
    return to_hex(encode(CONSTRUCTOR_TYPES, list(raffle_config.constructor_args())))[2:]


GOERLI_VERIFY_ARGS = verify_args(get_network_config("goerli"))
