"""Registry and credential records owned by the cluster manager."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RegistryRecord:
    """A container registry configured in the cluster manager."""

    id: str
    server_address: str


@dataclass(frozen=True, slots=True)
class CredentialRecord:
    """The stored username/password of a registry."""

    id: str
    registry_id: str
    username: str = ""
    password: str = field(default="", repr=False)
