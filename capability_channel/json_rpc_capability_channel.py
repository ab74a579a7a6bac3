import itertools
import json
import sys
from threading import Lock
from typing import Any, BinaryIO, Optional

from capability_channel.base_capability_channel import (
    REGISTER_CAPABILITY,
    UNREGISTER_CAPABILITY,
    BaseCapabilityChannel,
    CapabilityChannelError,
)
from common.models import ProtocolModel, RegistrationParams, UnregistrationParams
from common.utils import logger


class JsonRpcCapabilityChannel(BaseCapabilityChannel):
    """Writes capability requests to a stream as LSP-framed JSON-RPC messages.

    Responses are routed by the session layer, so a call returns once the
    request has been written in full. A rejection sent back by the peer is not
    reported to the caller.
    """

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self._stream = stream
        self._request_ids = itertools.count(1)
        self._write_lock = Lock()

    @property
    def stream(self) -> BinaryIO:
        return self._stream if self._stream is not None else sys.stdout.buffer

    def register_capability(self, params: RegistrationParams) -> None:
        self._send(REGISTER_CAPABILITY, params)

    def unregister_capability(self, params: UnregistrationParams) -> None:
        self._send(UNREGISTER_CAPABILITY, params)

    @staticmethod
    def encode(request_id: int, method: str, params: ProtocolModel) -> bytes:
        """Frame a JSON-RPC request with the ``Content-Length`` header.

        Args:
            request_id: JSON-RPC request id
            method: LSP method name
            params: Request parameters

        Returns:
            Header and UTF-8 body ready to be written to the stream
        """
        payload: dict[str, Any] = {
            "jsonrpc": "2.0",
            "id": request_id,
            "method": method,
            "params": params.to_wire(),
        }
        body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        header = f"Content-Length: {len(body)}\r\n\r\n".encode("ascii")
        return header + body

    def _send(self, method: str, params: ProtocolModel) -> None:
        with self._write_lock:
            request_id = next(self._request_ids)
            message = self.encode(request_id, method, params)
            try:
                self.stream.write(message)
                self.stream.flush()
            except OSError as e:
                logger.error(f"Failed to write {method} request {request_id}: {e}")
                raise CapabilityChannelError(method, str(e)) from e

        logger.debug(f"Sent {method} request {request_id} ({len(message)} bytes)")
