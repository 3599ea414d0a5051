from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


class FailureKind(str, Enum):
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    SERVER_STATUS = "server_status"
    MALFORMED_RESPONSE = "malformed_response"
    INVALID_SHAPE = "invalid_shape"
    UNKNOWN_ENDPOINT = "unknown_endpoint"
    UNKNOWN_MOCK_KEY = "unknown_mock_key"
    INVALID_REQUEST = "invalid_request"


TRANSIENT_KINDS = frozenset({FailureKind.TIMEOUT, FailureKind.TRANSPORT})


class SuccessEnvelope(BaseModel):
    """Successful fetch carrying the parsed payload."""
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    data: Any


class FailureEnvelope(BaseModel):
    """Failed fetch. `status` is 0 when no HTTP status was received."""
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    kind: FailureKind
    message: str
    status: int = 0
    cause: Optional[Any] = None

    @property
    def retryable(self) -> bool:
        return self.kind in TRANSIENT_KINDS


Envelope = Union[SuccessEnvelope, FailureEnvelope]


def success(data: Any) -> SuccessEnvelope:
    return SuccessEnvelope(data=data)


def failure(
    kind: FailureKind,
    message: str,
    status: int = 0,
    cause: Optional[Any] = None,
) -> FailureEnvelope:
    return FailureEnvelope(kind=kind, message=message, status=status, cause=cause)
