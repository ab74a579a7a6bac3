from enum import IntFlag
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WatchKind(IntFlag):
    CREATE = 1
    CHANGE = 2
    DELETE = 4


# Create | Change | Delete == 7
WATCH_ALL_KIND = int(WatchKind.CREATE | WatchKind.CHANGE | WatchKind.DELETE)


class ProtocolModel(BaseModel):
    """Base for models sent over the wire with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class FileSystemWatcher(ProtocolModel):
    glob_pattern: str
    kind: int = Field(default=WATCH_ALL_KIND)


class DidChangeWatchedFilesRegistrationOptions(ProtocolModel):
    watchers: List[FileSystemWatcher] = Field(default_factory=list)


class Registration(ProtocolModel):
    id: str
    method: str
    register_options: DidChangeWatchedFilesRegistrationOptions | None = Field(default=None)


class RegistrationParams(ProtocolModel):
    registrations: List[Registration] = Field(default_factory=list)


class Unregistration(ProtocolModel):
    id: str
    method: str


class UnregistrationParams(ProtocolModel):
    # LSP keeps the historical "unregisterations" spelling on the wire
    unregisterations: List[Unregistration] = Field(default_factory=list)
