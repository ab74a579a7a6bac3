"""Watcher service that registers file watchers through the LSP capability requests."""

from threading import RLock
from typing import Callable, List, Sequence, Tuple

from capability_channel.base_capability_channel import BaseCapabilityChannel
from common.models import (
    WATCH_ALL_KIND,
    DidChangeWatchedFilesRegistrationOptions,
    FileSystemWatcher,
    Registration,
    RegistrationParams,
    Unregistration,
    UnregistrationParams,
)
from common.utils import logger

from .base import BaseWatcherService

# Glob pattern to watch the copybooks folder and copybook files
COPYBOOKS_FOLDER_GLOB = "**/.copybooks/**/*"

WATCH_FILES = "workspace/didChangeWatchedFiles"
WATCH_CONFIGURATION = "workspace/didChangeConfiguration"
CONFIGURATION_CHANGE_ID = "configurationChange"
PREDEFINED_FOLDER_WATCHER = "copybooksWatcher"


def to_glob_pattern(path: str) -> str:
    """Match every file at any depth under a folder named ``path``."""
    return f"**/{path}/**/*"


def reject_single_path(paths: Sequence[str]) -> None:
    # A bare str is a Sequence[str] too and would be split into characters
    if isinstance(paths, str):
        raise TypeError(f"Expected a sequence of paths, got str: {paths!r}")


def files_registration(registration_id: str, glob_pattern: str) -> Registration:
    return Registration(
        id=registration_id,
        method=WATCH_FILES,
        register_options=DidChangeWatchedFilesRegistrationOptions(
            watchers=[FileSystemWatcher(glob_pattern=glob_pattern, kind=WATCH_ALL_KIND)]
        ),
    )


class CapabilityWatcherService(BaseWatcherService):
    """Keeps the folders watched on behalf of the server and registers them with the client.

    A folder identifier is also the registration id, so the same folder can be
    added twice and each copy is removed independently. The channel is resolved
    through ``channel_provider`` on every call and local state is changed only
    after the channel accepted the request. The lock is held for the whole
    channel call, so readers of the watched folders wait for an in-flight request.
    """

    def __init__(self, channel_provider: Callable[[], BaseCapabilityChannel]) -> None:
        super().__init__()
        self._channel_provider = channel_provider
        self._folder_watchers: List[str] = []
        self._lock = RLock()

    @property
    def channel(self) -> BaseCapabilityChannel:
        return self._channel_provider()

    def get_watching_folders(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._folder_watchers)

    def watch_configuration_change(self) -> None:
        self._register(
            [Registration(id=CONFIGURATION_CHANGE_ID, method=WATCH_CONFIGURATION)]
        )

    def watch_predefined_folder(self) -> None:
        self._register(
            [files_registration(PREDEFINED_FOLDER_WATCHER, COPYBOOKS_FOLDER_GLOB)]
        )

    def add_watchers(self, paths: Sequence[str]) -> None:
        reject_single_path(paths)
        with self._lock:
            added = list(paths)
            if not added:
                return

            self._register(
                [files_registration(path, to_glob_pattern(path)) for path in added]
            )
            self._folder_watchers.extend(added)

    def remove_watchers(self, paths: Sequence[str]) -> None:
        reject_single_path(paths)
        with self._lock:
            remaining = list(self._folder_watchers)
            removed: List[str] = []
            for path in paths:
                if path in remaining:
                    remaining.remove(path)
                    removed.append(path)

            if not removed:
                logger.debug("No watched folders to remove")
                return

            params = UnregistrationParams(
                unregisterations=[Unregistration(id=path, method=WATCH_FILES) for path in removed]
            )
            logger.debug(f"Unregistering watchers: {removed}")
            try:
                self.channel.unregister_capability(params)
            except Exception as e:
                logger.error(f"Failed to unregister watchers {removed}: {e}")
                raise

            self._folder_watchers[:] = remaining

    def _register(self, registrations: List[Registration]) -> None:
        ids = [registration.id for registration in registrations]
        logger.debug(f"Registering watchers: {ids}")
        try:
            self.channel.register_capability(RegistrationParams(registrations=registrations))
        except Exception as e:
            logger.error(f"Failed to register watchers {ids}: {e}")
            raise
