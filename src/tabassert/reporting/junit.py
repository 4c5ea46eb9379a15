from __future__ import annotations

from pathlib import Path

from junitparser import Failure, JUnitXml, TestCase, TestSuite


class JUnitCaseReporter:
    """Reporter bound to a single JUnit test case; each error adds a <failure>."""

    def __init__(self, case: TestCase) -> None:
        self.case = case

    @property
    def name(self) -> str:
        return self.case.name

    def error(self, message: str) -> None:
        # The Error: row becomes the one-line failure message.
        summary = next(
            (
                " ".join(line.split()[1:])
                for line in message.splitlines()
                if line.startswith("Error:")
            ),
            "assertion failed",
        )
        failure = Failure(summary)
        failure.text = message
        self.case.result = [*self.case.result, failure]


class JUnitReporter:
    """Collects assertion failures into one JUnit test suite.

        junit = JUnitReporter("api")
        equal(junit.case("status code"), 200, resp.status)
        junit.write(Path("junit.xml"))
    """

    def __init__(self, suite_name: str) -> None:
        self.suite = TestSuite(suite_name)

    def case(self, name: str, classname: str | None = None) -> JUnitCaseReporter:
        case = TestCase(name)
        case.classname = classname or self.suite.name
        self.suite.add_testcase(case)
        return JUnitCaseReporter(case)

    @property
    def failures(self) -> int:
        self.suite.update_statistics()
        return self.suite.failures

    def write(self, path: Path) -> Path:
        """Write junit.xml for the collected cases, return path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        self.suite.update_statistics()

        xml = JUnitXml()
        xml.append(self.suite)
        xml.write(str(path), pretty=True)
        return path
