from threading import RLock
from typing import Any

from capability_channel.base_capability_channel import (
    REGISTER_CAPABILITY,
    UNREGISTER_CAPABILITY,
    BaseCapabilityChannel,
    CapabilityChannelError,
)
from common.models import Registration, RegistrationParams, UnregistrationParams
from common.utils import logger


class InMemoryCapabilityChannel(BaseCapabilityChannel):
    """Channel that acts as the remote peer inside the current process.

    Accepted registrations are kept in arrival order and every request is
    appended to ``requests`` as ``(method, params)``. Registering the same id
    twice keeps two entries; each unregistration drops the first one.
    """

    def __init__(self) -> None:
        self._requests: list[tuple[str, Any]] = []
        self._registrations: list[Registration] = []
        self._lock = RLock()

    @property
    def requests(self) -> list[tuple[str, Any]]:
        with self._lock:
            return list(self._requests)

    @property
    def registrations(self) -> list[Registration]:
        with self._lock:
            return list(self._registrations)

    def registered_ids(self) -> list[str]:
        with self._lock:
            return [registration.id for registration in self._registrations]

    def register_capability(self, params: RegistrationParams) -> None:
        with self._lock:
            self._requests.append((REGISTER_CAPABILITY, params))
            self._registrations.extend(params.registrations)
            logger.debug(
                f"Accepted {len(params.registrations)} registration(s): "
                f"{[r.id for r in params.registrations]}"
            )

    def unregister_capability(self, params: UnregistrationParams) -> None:
        with self._lock:
            self._requests.append((UNREGISTER_CAPABILITY, params))

            remaining = list(self._registrations)
            unknown: list[str] = []
            for unregistration in params.unregisterations:
                match = next(
                    (
                        r
                        for r in remaining
                        if r.id == unregistration.id and r.method == unregistration.method
                    ),
                    None,
                )
                if match is None:
                    unknown.append(unregistration.id)
                else:
                    remaining.remove(match)

            if unknown:
                raise CapabilityChannelError(
                    UNREGISTER_CAPABILITY, f"unknown registration id(s): {unknown}"
                )

            self._registrations = remaining
            logger.debug(
                f"Dropped {len(params.unregisterations)} registration(s): "
                f"{[u.id for u in params.unregisterations]}"
            )
