from ape.exceptions import ApeException


class DeploymentError(ApeException):
    pass


class UnknownSignerError(DeploymentError):
    def __init__(self, address):
        self.address = address
        super().__init__(f"{address} is not a named account")


class DeploymentNotFoundError(DeploymentError):
    def __init__(self, name, network):
        self.name = name
        self.network = network
        super().__init__(f"No deployment of '{name}' recorded on '{network}'")


class NamedAccountsError(DeploymentError):
    pass


class ContractNotFoundError(DeploymentError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"No contract named '{name}' in the project")
