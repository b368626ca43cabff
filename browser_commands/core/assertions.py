"""In-memory assertion recorder."""

from typing import List, Optional

from ..types import AssertionRecord
from ..utils.logger import CommandLogger, get_logger
from .interfaces import AssertionRecorder


class AssertionLog(AssertionRecorder):
    """
    Keeps every recorded assertion in order.

    The host inspects the log after each command to decide whether the rest
    of the queue should still run.
    """

    def __init__(self, logger: Optional[CommandLogger] = None):
        self._logger = (logger or get_logger()).child(component="assertions")
        self._records: List[AssertionRecord] = []

    @property
    def records(self) -> List[AssertionRecord]:
        return list(self._records)

    @property
    def passed(self) -> List[AssertionRecord]:
        return [record for record in self._records if record.passed]

    @property
    def failed(self) -> List[AssertionRecord]:
        return [record for record in self._records if not record.passed]

    def assertion(
        self,
        passed: bool,
        actual: str,
        expected: str,
        message: str,
        abort_on_failure: bool = False,
        command: Optional[str] = None,
    ) -> AssertionRecord:
        record = AssertionRecord(
            passed=passed,
            actual=actual,
            expected=expected,
            message=message,
            abort_on_failure=abort_on_failure,
            command=command,
        )
        self._records.append(record)

        if passed:
            self._logger.info("assertion:passed", message, command=command)
        else:
            self._logger.error(
                "assertion:failed",
                message,
                command=command,
                actual=actual,
                expected=expected,
            )
        return record

    def clear(self) -> None:
        self._records.clear()
