# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    StorageProvider,
    RepositoryProvider,
    UploadProvider,
    LogProvider,
    VerifiedUserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Collection files (StorageProvider)
    2. Repositories (RepositoryProvider) - depends on collection files
    3. Photo storage (UploadProvider)
    4. Use cases (LogProvider, VerifiedUserProvider) - depend on the above
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: storage → repositories → uploads → use cases
        """
        self.register_singleton(Settings, self.settings)

        StorageProvider.register(self)
        RepositoryProvider.register(self)
        UploadProvider.register(self)
        LogProvider.register(self)
        VerifiedUserProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
