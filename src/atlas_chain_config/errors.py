from __future__ import annotations


class ChainConfigError(Exception):
    """Base class for all chain configuration errors."""


class NotFoundError(ChainConfigError, LookupError):
    """Raised when a network id is not present in the registry."""

    def __init__(self, network_id: int, message: str | None = None) -> None:
        self.network_id = network_id
        super().__init__(
            message or f"Chain configuration not found for chainId: {network_id}"
        )


class ChainConfigNotFoundError(NotFoundError):
    """Raised when no configuration exists for the requested chain id."""


class VersionNotFoundError(NotFoundError):
    """Raised when the network is known but the requested version is not."""

    def __init__(self, network_id: int, version: str) -> None:
        self.version = version
        super().__init__(
            network_id, f"Version {version} not found for chainId: {network_id}"
        )


class IncompleteNewEntryError(ChainConfigError, ValueError):
    """
    Raised when a merge targets a network/version pair that does not exist yet
    and the supplied record is partial.
    """

    def __init__(self, network_id: int, version: str, *, new_network: bool) -> None:
        self.network_id = network_id
        self.version = version
        self.new_network = new_network
        if new_network:
            msg = f"Full chain configuration must be provided for new chainId: {network_id}"
        else:
            msg = (
                "Full chain configuration must be provided for new version "
                f"{version} on chainId: {network_id}"
            )
        super().__init__(msg)


class InvalidRecordError(ChainConfigError, ValueError):
    """Raised when a record (or update) does not have the expected shape or kinds."""


class InvalidNetworkIdError(ChainConfigError, ValueError):
    """Raised when a network id is not a non-negative integer or decimal string."""


class UnknownContractRoleError(ChainConfigError, KeyError):
    """Raised when a contract role name is not one of the five Atlas roles."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class RegistryLoadError(ChainConfigError, RuntimeError):
    """Raised when the baseline registry cannot be loaded from its source."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Failed to load chain configuration from {source}: {reason}")
