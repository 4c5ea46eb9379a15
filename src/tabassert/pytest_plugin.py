"""pytest integration providing the ``tassert`` fixture.

Enable with ``pytest_plugins = ["tabassert.pytest_plugin"]`` in a conftest or
``-p tabassert.pytest_plugin`` on the command line. Failed assertions do not
stop the test; the test is reported as failed once its call phase ends, with
every collected failure table as the failure text.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tabassert.asserter import Asserter
from tabassert.config import load_config, set_config
from tabassert.reporting.base import RecordingReporter

_reporter_key = pytest.StashKey[RecordingReporter]()


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("tabassert")
    group.addoption(
        "--tabassert-config",
        default=None,
        help="YAML file configuring tabassert failure tables",
    )


def pytest_configure(config: pytest.Config) -> None:
    path = config.getoption("tabassert_config")
    if path:
        set_config(load_config(Path(path)))


@pytest.fixture
def tassert(request: pytest.FixtureRequest) -> Asserter:
    reporter = RecordingReporter(name=request.node.nodeid)
    request.node.stash[_reporter_key] = reporter
    return Asserter(reporter)


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[None]):
    report = yield

    reporter = item.stash.get(_reporter_key, None)
    if report.when != "call" or reporter is None or not reporter.failed:
        return report

    failures = "\n".join(reporter.errors)
    if report.passed:
        report.outcome = "failed"
        report.longrepr = failures
    else:
        report.sections.append(("tabassert failures", failures))

    return report
