"""Per-network deployment parameters for the raffle.

Everything the Raffle constructor needs is collected in a ``RaffleConfig``
and handed to the deploy script, so nothing downstream has to look at the
active network again.
"""
import os
from dataclasses import dataclass
from typing import Optional

from eth_utils import to_bytes, to_checksum_address, to_wei

DEVELOPMENT_CHAINS = ("pyevm", "anvil")

# VRF coordinator mock pricing: 0.25 LINK premium per request, 1e9 LINK-wei per gas
BASE_FEE = to_wei("0.25", "ether")
GAS_PRICE_LINK = 10**9
VRF_SUB_FUND_AMOUNT = to_wei(30, "ether")


@dataclass(frozen=True)
class RaffleConfig:
    vrf_coordinator: str
    entrance_fee: int
    gas_lane: bytes
    subscription_id: int
    callback_gas_limit: int
    interval: int

    def constructor_args(self) -> tuple:
        """Arguments in the order ``raffle.vy`` declares them."""
        return (
            self.vrf_coordinator,
            self.entrance_fee,
            self.gas_lane,
            self.subscription_id,
            self.callback_gas_limit,
            self.interval,
        )


@dataclass(frozen=True)
class NetworkConfig:
    name: str
    chain_id: int
    entrance_fee: int
    gas_lane: str
    callback_gas_limit: int
    interval: int
    vrf_coordinator: Optional[str] = None
    subscription_id: Optional[int] = None
    # environment variable holding the subscription id, read by raffle_config
    subscription_id_env: Optional[str] = None

    @property
    def is_development(self) -> bool:
        return self.name in DEVELOPMENT_CHAINS

    def raffle_config(
        self, vrf_coordinator: Optional[str] = None, subscription_id: Optional[int] = None
    ) -> RaffleConfig:
        coordinator = vrf_coordinator or self.vrf_coordinator
        sub_id = subscription_id if subscription_id is not None else self.subscription_id
        if sub_id is None and self.subscription_id_env:
            sub_id = _env_subscription_id(self.subscription_id_env)
        if coordinator is None:
            raise ValueError(f"no VRF coordinator configured for {self.name}")
        if sub_id is None:
            raise ValueError(
                f"no VRF subscription configured for {self.name}, set VRF_SUBSCRIPTION_ID"
            )
        return RaffleConfig(
            vrf_coordinator=to_checksum_address(coordinator),
            entrance_fee=self.entrance_fee,
            gas_lane=to_bytes(hexstr=self.gas_lane),
            subscription_id=sub_id,
            callback_gas_limit=self.callback_gas_limit,
            interval=self.interval,
        )


def _env_subscription_id(variable: str) -> Optional[int]:
    value = os.environ.get(variable)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{variable} must be an integer, got {value!r}") from None


# Any key hash works against the mock
_LOCAL_GAS_LANE = "0x474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"

NETWORK_CONFIG = {
    "pyevm": NetworkConfig(
        name="pyevm",
        chain_id=31337,
        entrance_fee=to_wei("0.1", "ether"),
        gas_lane=_LOCAL_GAS_LANE,
        callback_gas_limit=500_000,
        interval=30,
    ),
    "anvil": NetworkConfig(
        name="anvil",
        chain_id=31337,
        entrance_fee=to_wei("0.1", "ether"),
        gas_lane=_LOCAL_GAS_LANE,
        callback_gas_limit=500_000,
        interval=30,
    ),
    "sepolia": NetworkConfig(
        name="sepolia",
        chain_id=11155111,
        entrance_fee=to_wei("0.01", "ether"),
        gas_lane="0x474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c",
        callback_gas_limit=500_000,
        interval=30,
        vrf_coordinator="0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
        subscription_id_env="VRF_SUBSCRIPTION_ID",
    ),
    "goerli": NetworkConfig(
        name="goerli",
        chain_id=5,
        entrance_fee=to_wei("0.1", "ether"),
        gas_lane="0x79d3d8832d904592c0bf9818b621522c988bb8b0c05cdc3b15aea1b6e8db0c15",
        callback_gas_limit=500_000,
        interval=30,
        vrf_coordinator="0x2ca8e0c643bde4c2e08ab1fa0da3401adad7734d",
        subscription_id=1333,
    ),
}


def get_network_config(name: str) -> NetworkConfig:
    try:
        return NETWORK_CONFIG[name]
    except KeyError:
        raise ValueError(f"no raffle configuration for network {name!r}") from None
