from tabassert.reporting.base import RecordingReporter, Reporter
from tabassert.reporting.junit import JUnitCaseReporter, JUnitReporter

__all__ = [
    "JUnitCaseReporter",
    "JUnitReporter",
    "RecordingReporter",
    "Reporter",
]
