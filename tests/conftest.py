import pytest

from deployment.constants import DEPLOY_DIR
from deployment.context import ApeDeployments, ApeDeploymentContext
from deployment.runner import load_steps
from fakes import (
    FakeAccount,
    FakeAccountManager,
    FakeProject,
    RecordingDeployments,
    StubContext,
)


############ STEP FIXTURES ############


@pytest.fixture(scope="session")
def deploy_steps():
    yield load_steps(DEPLOY_DIR)


@pytest.fixture(scope="session")
def footwears_step(deploy_steps):
    (step,) = [step for step in deploy_steps if step.name == "deploy_footwears"]
    yield step


############ STANDARD FIXTURES ############


@pytest.fixture(scope="session")
def deployer_address():
    yield "0xABC0000000000000000000000000000000000001"


@pytest.fixture
def deployer(deployer_address):
    yield FakeAccount(deployer_address)


@pytest.fixture
def other():
    yield FakeAccount("0xDEF0000000000000000000000000000000000002")


@pytest.fixture
def account_manager(deployer, other):
    yield FakeAccountManager([deployer, other], aliases={"deployer": deployer})


@pytest.fixture
def fake_project():
    yield FakeProject("Footwears")


############ HELPER FUNCTIONS ############


@pytest.fixture
def create_stub_context(deployer_address):
    def create_stub_context(named_accounts=None, error=None):
        if named_accounts is None:
            named_accounts = {"deployer": deployer_address}

        return StubContext(named_accounts, RecordingDeployments(error=error))

    yield create_stub_context


@pytest.fixture
def create_context(deployer, fake_project, tmp_path):
    def create_context(network_name="local", named_accounts=None):
        if named_accounts is None:
            named_accounts = {"deployer": deployer}

        deployments = ApeDeployments(
            fake_project, named_accounts, network_name, deployments_dir=tmp_path
        )
        return ApeDeploymentContext(named_accounts, deployments)

    yield create_context
