from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.deploy_mocks import deploy_vrf_coordinator_mock
from script.update_front_end import update_front_end
from src import raffle
from upkeep_raffle.config import VRF_SUB_FUND_AMOUNT, NetworkConfig, get_network_config
from upkeep_raffle.frontend import should_update_front_end


def deploy_raffle(network_config: NetworkConfig, vrf_coordinator=None) -> VyperContract:
    """Deploy the raffle for ``network_config``.

    On development chains the VRF coordinator mock (deployed here unless one
    is passed in) gets a funded subscription and the raffle is added to it as
    a consumer. Live networks use the configured coordinator and
    subscription; the consumer has to be added in the Chainlink UI.
    """
    if network_config.is_development:
        if vrf_coordinator is None:
            vrf_coordinator = deploy_vrf_coordinator_mock()
        subscription_id = vrf_coordinator.createSubscription()
        vrf_coordinator.fundSubscription(subscription_id, VRF_SUB_FUND_AMOUNT)
        config = network_config.raffle_config(vrf_coordinator.address, subscription_id)
    else:
        config = network_config.raffle_config()

    raffle_contract = raffle.deploy(*config.constructor_args())
    print(f"Raffle deployed at: {raffle_contract.address}")

    if network_config.is_development:
        vrf_coordinator.addConsumer(config.subscription_id, raffle_contract.address)
        print(f"Raffle added as consumer of subscription {config.subscription_id}")
    else:
        print(
            f"Add {raffle_contract.address} as a consumer of subscription "
            f"{config.subscription_id} before the first upkeep"
        )
    print("-------------------------------------------------------")
    return raffle_contract


def moccasin_main() -> VyperContract:
    network_config = get_network_config(get_active_network().name)
    raffle_contract = deploy_raffle(network_config)
    if should_update_front_end():
        update_front_end(raffle_contract, network_config.chain_id)
    return raffle_contract
