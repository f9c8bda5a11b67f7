"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import List, Optional

logger = logging.getLogger()


class CheckStatus:
    PASSED = "Passed"
    FAILED = "Failed"
    SKIPPED = "Skipped"


class CheckResult:
    def __init__(self, name: str) -> None:
        self.name = name
        self.failures: List[str] = []
        self.skipped = False

    @property
    def status(self) -> str:
        if self.skipped:
            return CheckStatus.SKIPPED
        return CheckStatus.FAILED if self.failures else CheckStatus.PASSED

    def fail(self, message: str) -> None:
        logger.error(f"{self.name}: {message}")
        self.failures.append(message)

    def skip(self) -> None:
        logger.info(f"{self.name} is not enabled for this example, skipping")
        self.skipped = True

    def __repr__(self) -> str:
        return f"CheckResult({self.name!r}, {self.status!r}, {self.failures!r})"


class AcceptanceReport:
    def __init__(self, results: Optional[List[CheckResult]] = None) -> None:
        self.results: List[CheckResult] = results or []

    def add(self, result: CheckResult) -> None:
        self.results.append(result)

    @property
    def passed(self) -> bool:
        return all(result.status != CheckStatus.FAILED for result in self.results)

    @property
    def failures(self) -> List[str]:
        return [
            f"{result.name}: {message}"
            for result in self.results
            for message in result.failures
        ]

    def by_name(self, name: str) -> CheckResult:
        for result in self.results:
            if result.name == name:
                return result
        raise KeyError(name)

    def statuses(self) -> dict[str, str]:
        return {result.name: result.status for result in self.results}
