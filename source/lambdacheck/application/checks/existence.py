"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from lambdacheck.application.model.outputs import InfrastructureOutputs
from lambdacheck.application.model.results import CheckResult

if TYPE_CHECKING:
    from mypy_boto3_lambda.client import LambdaClient
else:
    LambdaClient = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)

CHECK_NAME = "TestLambdaFunctionExists"


class ExistenceCheck:
    def __init__(self, lambda_client: LambdaClient) -> None:
        self.lambda_client = lambda_client

    def run(self, outputs: InfrastructureOutputs) -> CheckResult:
        logger.info(f"{CHECK_NAME} started for {outputs.function_name}.")
        result = CheckResult(CHECK_NAME)
        try:
            function = self.lambda_client.get_function(
                FunctionName=outputs.function_name
            )
        except (ClientError, BotoCoreError) as e:
            result.fail(f"Failure during GetFunction: {e}")
            return result

        configuration = function["Configuration"]
        assert_equal(
            result,
            configuration.get("FunctionArn"),
            outputs.function_arn,
            "Expected ARN did not match actual ARN!",
        )
        assert_equal(
            result,
            configuration.get("FunctionName"),
            outputs.function_name,
            "Expected Name did not match actual Name!",
        )
        logger.info(f"{CHECK_NAME} finished: {result.status}")
        return result


def assert_equal(
    result: CheckResult, actual: object, expected: str, message: str
) -> bool:
    if actual == expected:
        return True
    result.fail(f"{message}\nexpected: {expected!r}\nactual  : {actual!r}")
    return False
