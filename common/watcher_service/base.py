"""Base watcher service interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple


class BaseWatcherService(ABC):
    """Abstract base class for services that register file watchers with the client."""

    @abstractmethod
    def watch_configuration_change(self) -> None:
        """Register for configuration change notifications."""
        pass

    @abstractmethod
    def watch_predefined_folder(self) -> None:
        """Register a watcher for the predefined copybooks folder."""
        pass

    @abstractmethod
    def get_watching_folders(self) -> Tuple[str, ...]:
        """Get the folders currently watched.

        Returns:
            Folder identifiers in the order they were added
        """
        pass

    @abstractmethod
    def add_watchers(self, paths: Sequence[str]) -> None:
        """Register one watcher per folder.

        Args:
            paths: Folder identifiers; each is also used as the registration id

        Raises:
            TypeError: If a single str is passed instead of a sequence
            CapabilityChannelError: If the client did not accept the registrations
        """
        pass

    @abstractmethod
    def remove_watchers(self, paths: Sequence[str]) -> None:
        """Unregister watchers previously added for the given folders.

        Folders that are not watched are ignored.

        Args:
            paths: Folder identifiers to stop watching

        Raises:
            TypeError: If a single str is passed instead of a sequence
            CapabilityChannelError: If the client did not accept the unregistrations
        """
        pass
