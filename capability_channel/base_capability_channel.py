from abc import ABC, abstractmethod

from common.models import RegistrationParams, UnregistrationParams

REGISTER_CAPABILITY = "client/registerCapability"
UNREGISTER_CAPABILITY = "client/unregisterCapability"


class CapabilityChannelError(RuntimeError):
    """Raised when the remote peer rejects or cannot receive a capability request."""

    def __init__(self, method: str, message: str) -> None:
        super().__init__(f"{method} failed: {message}")
        self.method = method


class BaseCapabilityChannel(ABC):
    @abstractmethod
    def register_capability(self, params: RegistrationParams) -> None:
        pass

    @abstractmethod
    def unregister_capability(self, params: UnregistrationParams) -> None:
        pass
