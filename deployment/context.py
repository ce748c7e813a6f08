import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from ape import accounts, networks, project
from ape.logging import logger

from deployment.accounts import read_named_accounts, resolve_named_accounts
from deployment.constants import DEPLOYMENTS_DIR, LOCAL_BLOCKCHAIN_ENVIRONMENTS
from deployment.exceptions import (
    ContractNotFoundError,
    DeploymentNotFoundError,
    UnknownSignerError,
)


@dataclass(frozen=True)
class DeployOptions:
    """Options for a single contract deployment.

    ``sender`` is the address that signs and pays for the deployment and
    must belong to one of the context's named accounts.
    """

    sender: str
    args: Sequence[Any] = ()
    log: bool = False


def _to_json(value):
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]

    if isinstance(value, dict):
        return {str(key): _to_json(item) for key, item in value.items()}

    if isinstance(value, bytes):
        return "0x" + value.hex()

    if hasattr(value, "address"):
        return str(value.address)

    return str(value)


class ApeDeployments:
    def __init__(self, project_manager, named_accounts, network_name, deployments_dir=DEPLOYMENTS_DIR):
        self.project = project_manager
        self.named_accounts = named_accounts
        self.network_name = network_name
        self.deployments_dir = Path(deployments_dir)

    @property
    def persist(self):
        return self.network_name not in LOCAL_BLOCKCHAIN_ENVIRONMENTS

    def _signer_for(self, address):
        for account in self.named_accounts.values():
            if str(account.address).lower() == str(address).lower():
                return account

        raise UnknownSignerError(address)

    def _record_path(self, name):
        return self.deployments_dir / self.network_name / f"{name}.json"

    def _write_record(self, name, contract, signer, args):
        record = {
            "address": str(contract.address),
            "transaction_hash": str(contract.txn_hash),
            "block_number": contract.receipt.block_number,
            "deployer": str(signer.address),
            "args": [_to_json(arg) for arg in args],
            "abi": [abi.model_dump(mode="json") for abi in contract.contract_type.abi],
        }

        path = self._record_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(record, f, indent=2)

        return path

    def deploy(self, name, options: DeployOptions):
        container = self.project.get_contract(name)
        if container is None:
            raise ContractNotFoundError(name)

        signer = self._signer_for(options.sender)

        contract = signer.deploy(container, *options.args)

        if options.log:
            logger.info(
                f"deployed '{name}' at {contract.address} (tx: {contract.txn_hash})"
            )

        if self.persist:
            path = self._write_record(name, contract, signer, options.args)
            logger.debug(f"'{name}' deployment saved to {path}")

        return contract

    def get(self, name):
        path = self._record_path(name)
        if not path.exists():
            raise DeploymentNotFoundError(name, self.network_name)

        with open(path, "r") as f:
            return json.load(f)


class ApeDeploymentContext:
    def __init__(self, named_accounts, deployments):
        self.named_accounts = named_accounts
        self.deployments = deployments

    @classmethod
    def from_yaml(cls, filepath, deployments_dir=DEPLOYMENTS_DIR):
        network_name = networks.active_provider.network.name
        config = read_named_accounts(filepath)
        named_accounts = resolve_named_accounts(accounts, config, network_name)

        deployments = ApeDeployments(
            project, named_accounts, network_name, deployments_dir=deployments_dir
        )
        return cls(named_accounts, deployments)

    def get_named_accounts(self):
        return {role: account.address for role, account in self.named_accounts.items()}
