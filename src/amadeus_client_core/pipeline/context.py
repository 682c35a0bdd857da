"""Per-call state threaded through the policy chain."""

import uuid
from dataclasses import dataclass, field
from typing import Any


def _new_request_id() -> str:
    return uuid.uuid4().hex


@dataclass(eq=False)
class PipelineContext:
    """Execution state for one ``HttpPipeline.send`` call.

    A fresh context is created for every send and shared by all retry attempts
    of that call. Policies run strictly one after another, so no locking is needed.

    Attributes:
        request_id: 32 hex character id used for correlation and logging.
        attempt: Number of downstream attempts made so far; set by RetryPolicy.
        items: Free-form annotations policies leave for each other.
    """

    request_id: str = field(default_factory=_new_request_id)
    attempt: int = 0
    items: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.request_id:
            self.request_id = _new_request_id()
