"""Blocking wait on a GCE long-running operation"""

import time
from typing import Callable, Optional

from google.cloud import compute_v1
from loguru import logger

from .errors import OperationError, OperationTimeoutError

DEFAULT_INTERVAL = 10
DEFAULT_TIMEOUT = 20 * 60

Doable = Callable[[], compute_v1.Operation]
Progress = Callable[[str, float, compute_v1.Operation], None]


def log_progress(name: str, elapsed: float, op: compute_v1.Operation):
    logger.debug(f"Operation {name} after {elapsed:.0f}s: {op.status.name if op.status else 'UNKNOWN'}")


def operation_errors(op: compute_v1.Operation):
    return [f"{err.code}: {err.message}" if err.code else err.message for err in op.error.errors]


class Pending:
    """Polls an operation until it reaches DONE"""

    def __init__(
        self,
        name: str,
        doable: Doable,
        interval: float = DEFAULT_INTERVAL,
        timeout: float = DEFAULT_TIMEOUT,
        progress: Optional[Progress] = None,
    ):
        self.name = name
        self.interval = interval
        self.timeout = timeout
        self._doable = doable
        self._progress = progress or log_progress

    def wait(self) -> compute_v1.Operation:
        start = time.monotonic()
        while True:
            op = self._doable()
            elapsed = time.monotonic() - start

            if op.status == compute_v1.Operation.Status.DONE:
                errors = operation_errors(op)
                if errors:
                    raise OperationError(self.name, errors)
                logger.debug(f"Operation {self.name} done after {elapsed:.0f}s")
                return op

            self._progress(self.name, elapsed, op)
            if elapsed + self.interval > self.timeout:
                raise OperationTimeoutError(self.name, self.timeout)
            time.sleep(self.interval)
