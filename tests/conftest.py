import boa
import pytest

from script.deploy import deploy_raffle
from script.deploy_mocks import deploy_vrf_coordinator_mock
from upkeep_raffle.config import get_network_config

STARTING_BALANCE = 10**20


@pytest.fixture
def isolated_chain():
    """Roll the chain back after every test"""
    with boa.env.anchor():
        boa.env.set_balance(boa.env.eoa, STARTING_BALANCE)
        yield


@pytest.fixture
def network_config():
    return get_network_config("pyevm")


@pytest.fixture
def account(isolated_chain):
    acct = boa.env.generate_address("player")
    boa.env.set_balance(acct, STARTING_BALANCE)
    return acct


@pytest.fixture
def players(isolated_chain):
    accounts = [boa.env.generate_address(f"player{i}") for i in range(4)]
    for acct in accounts:
        boa.env.set_balance(acct, STARTING_BALANCE)
    return accounts


@pytest.fixture
def mock_vrf(isolated_chain):
    return deploy_vrf_coordinator_mock()


@pytest.fixture
def raffle_contract(network_config, mock_vrf):
    return deploy_raffle(network_config, mock_vrf)


@pytest.fixture
def entrance_fee(raffle_contract):
    return raffle_contract.get_entrance_fee()


@pytest.fixture
def interval(raffle_contract):
    return raffle_contract.get_interval()


@pytest.fixture
def entered_raffle(raffle_contract, account, entrance_fee, interval):
    """A raffle with one entrant whose interval has passed"""
    with boa.env.prank(account):
        raffle_contract.enter_raffle(value=entrance_fee)
    boa.env.time_travel(seconds=interval + 1)
    return raffle_contract
