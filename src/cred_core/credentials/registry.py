from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional, Type, TypeVar

from cred_core.credentials.models import Credential
from cred_core.errors import UnknownProvisionerError

CredentialFactory = Callable[[], Credential]
C = TypeVar("C", bound=Type[Credential])

logger = logging.getLogger("cred_core.registry")


class ProvisionerRegistry:
    """
    Thread-safe mapping provisioner name -> factory allocating an empty
    credential. Registration is expected at start-up; lookups happen per
    request. The last registration for a name wins.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._factories: Dict[str, CredentialFactory] = {}

    def register(self, provisioner_name: str, factory: CredentialFactory) -> None:
        with self._lock:
            replaced = provisioner_name in self._factories
            self._factories[provisioner_name] = factory
        if replaced:
            logger.warning(
                "Credential factory for provisioner %r replaced", provisioner_name
            )

    def unregister(self, provisioner_name: str) -> None:
        with self._lock:
            self._factories.pop(provisioner_name, None)

    def new(self, provisioner_name: str) -> Credential:
        """Return an empty credential for `provisioner_name`."""
        with self._lock:
            factory = self._factories.get(provisioner_name)
        if factory is None:
            raise UnknownProvisionerError(provisioner_name)
        return factory()

    def names(self) -> List[str]:
        """Snapshot of all registered provisioner names."""
        with self._lock:
            return sorted(self._factories)

    def clear(self) -> None:
        with self._lock:
            self._factories.clear()

    def __contains__(self, provisioner_name: object) -> bool:
        with self._lock:
            return provisioner_name in self._factories


default_registry = ProvisionerRegistry()


def register_credentialer(provisioner_name: str, factory: CredentialFactory) -> None:
    """
    Register the function that allocates an empty credential for a
    provisioner on the process-wide registry. Provisioner modules call this
    once at import time.
    """
    default_registry.register(provisioner_name, factory)


def register_provisioner(
    provisioner_name: str, registry: Optional[ProvisionerRegistry] = None
) -> Callable[[C], C]:
    """
    Decorator registering a Credential subclass as the factory for
    `provisioner_name`.

    Usage:
        @register_provisioner("aws")
        class AwsCredential(Credential): ...
    """

    def decorator(cls: C) -> C:
        target = registry if registry is not None else default_registry
        target.register(provisioner_name, cls)
        return cls

    return decorator
