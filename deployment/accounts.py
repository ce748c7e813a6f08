import yaml

from deployment.constants import DEFAULT_NETWORK_KEY
from deployment.exceptions import NamedAccountsError


def read_named_accounts(filepath):
    with open(filepath, "r") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise NamedAccountsError(f"{filepath} must map roles to accounts")

    return config


def resolve_account(account_manager, spec):
    """
    Turn one named-account entry into an ape account.

    An int is an index into the test accounts, a hex string is an address
    (impersonated when running against a fork) and anything else is the
    alias of an account in the local keystore.
    """
    if isinstance(spec, bool):
        raise NamedAccountsError(f"Invalid account spec: {spec!r}")

    if isinstance(spec, int):
        return account_manager.test_accounts[spec]

    if isinstance(spec, str):
        if spec.startswith("0x"):
            return account_manager[spec]

        return account_manager.load(spec)

    raise NamedAccountsError(f"Invalid account spec: {spec!r}")


def resolve_named_accounts(account_manager, config, network_name):
    named_accounts = {}

    for role, specs in config.items():
        if not isinstance(specs, dict):
            # Shorthand: same account on every network
            specs = {DEFAULT_NETWORK_KEY: specs}

        if network_name in specs:
            spec = specs[network_name]
        elif DEFAULT_NETWORK_KEY in specs:
            spec = specs[DEFAULT_NETWORK_KEY]
        else:
            continue

        named_accounts[role] = resolve_account(account_manager, spec)

    return named_accounts
