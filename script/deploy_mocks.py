from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from src.mocks import vrf_coordinator_v2_mock
from upkeep_raffle.config import BASE_FEE, DEVELOPMENT_CHAINS, GAS_PRICE_LINK


def deploy_vrf_coordinator_mock(
    base_fee: int = BASE_FEE, gas_price_link: int = GAS_PRICE_LINK
) -> VyperContract:
    print("Local network detected! Deploying mocks...")
    mock = vrf_coordinator_v2_mock.deploy(base_fee, gas_price_link)
    print(f"VRF Coordinator mock at: {mock.address}")
    print("Mocks Deployed!")
    print("-------------------------------------------------------")
    return mock


def moccasin_main() -> VyperContract:
    active_network = get_active_network()
    if active_network.name not in DEVELOPMENT_CHAINS:
        print(f"{active_network.name} is a live network, not deploying mocks")
        return None
    return deploy_vrf_coordinator_mock()
