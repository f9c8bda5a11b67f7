"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import Optional, Tuple

import requests

from lambdacheck.application.context.test_context import TestContext
from lambdacheck.application.model.outputs import InfrastructureOutputs
from lambdacheck.application.model.results import CheckResult
from lambdacheck.application.model.scenario import Scenario
from lambdacheck.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT

logger = logging.getLogger()
logger.setLevel(logging.INFO)

CHECK_NAMES = {
    Scenario.FOLDER_SOURCE: "InvokeExampleSourceFromFolder",
    Scenario.ZIP_SOURCE: "InvokeExampleSourceFromZip",
}


class InvocationCheck:
    """
    GETs the function URL and looks for the scenario's marker in the body.

    Only runs when the scenario is the active example; otherwise the result
    is reported as skipped and no request is made. Every failure is recorded
    on the result instead of raised.
    """

    def __init__(
        self,
        scenario: Scenario,
        http: Optional[requests.Session] = None,
        timeout: Tuple[float, float] = (
            DEFAULT_CONNECT_TIMEOUT,
            DEFAULT_READ_TIMEOUT,
        ),
    ) -> None:
        self.scenario = scenario
        self.http = http
        self.timeout = timeout

    @property
    def name(self) -> str:
        return CHECK_NAMES[self.scenario]

    def run(self, context: TestContext, outputs: InfrastructureOutputs) -> CheckResult:
        result = CheckResult(self.name)
        if not context.enabled_only_for_tests(self.scenario):
            result.skip()
            return result

        logger.info(f"{self.name} started against {outputs.function_url}.")
        if self.http is not None:
            self.invoke(self.http, outputs.function_url, result)
        else:
            with requests.Session() as http:
                self.invoke(http, outputs.function_url, result)
        logger.info(f"{self.name} finished: {result.status}")
        return result

    def invoke(self, http: requests.Session, url: str, result: CheckResult) -> None:
        try:
            response = http.get(url, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            result.fail(f"Failure during HTTP GET: {e}")
            return

        with response:
            if not 200 <= response.status_code < 300:
                result.fail(f"Unexpected HTTP status {response.status_code} from {url}")
            try:
                body = response.content
            except requests.RequestException as e:
                result.fail(f"Failure reading Body: {e}")
                return

        if self.scenario.marker.encode() not in body:
            result.fail(
                "Body did not contain expected response!\n"
                f"expected to contain: {self.scenario.marker!r}\n"
                f"body: {body.decode('utf-8', errors='replace')!r}"
            )
