"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Optional

import requests

from lambdacheck.application.checks.existence import ExistenceCheck
from lambdacheck.application.checks.invocation import InvocationCheck
from lambdacheck.application.context.test_context import TestContext
from lambdacheck.application.model.outputs import InfrastructureOutputs
from lambdacheck.application.model.results import AcceptanceReport
from lambdacheck.application.model.scenario import Scenario
from lambdacheck.config import Settings

if TYPE_CHECKING:
    from mypy_boto3_lambda.client import LambdaClient
else:
    LambdaClient = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class AcceptanceCheck:
    """
    Runs every check against one applied example and collects the results.

    Usage example:
        context = TestContext.for_example("examples/source_from_zip", settings)
        lambda_client = LambdaAPIsFactory.create_instance(settings)
        report = AcceptanceCheck(context, lambda_client, settings=settings).run()
        assert report.passed, report.failures

    Errors reading the outputs propagate. Failures inside a check are
    recorded on its result and never stop the checks after it.
    """

    def __init__(
        self,
        context: TestContext,
        lambda_client: LambdaClient,
        http: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.context = context
        self.settings = settings or Settings()
        self.http = http
        self.existence_check = ExistenceCheck(lambda_client)

    def read_outputs(self) -> InfrastructureOutputs:
        return InfrastructureOutputs.from_mapping(
            self.context.terraform_options().output_all()
        )

    def run(self) -> AcceptanceReport:
        logger.info(f"Acceptance checks started for {self.context.current_test_name}.")
        outputs = self.read_outputs()
        if self.http is not None:
            report = self.run_checks(outputs, self.http)
        else:
            with requests.Session() as http:
                report = self.run_checks(outputs, http)
        logger.info(f"Acceptance checks finished: {report.statuses()}")
        return report

    def run_checks(
        self, outputs: InfrastructureOutputs, http: requests.Session
    ) -> AcceptanceReport:
        report = AcceptanceReport()
        report.add(self.existence_check.run(outputs))
        for scenario in (Scenario.FOLDER_SOURCE, Scenario.ZIP_SOURCE):
            check = InvocationCheck(scenario, http, self.settings.http_timeout)
            report.add(check.run(self.context, outputs))
        return report
