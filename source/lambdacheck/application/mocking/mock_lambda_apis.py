"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import copy
import logging
from typing import Any, Dict, TYPE_CHECKING

from botocore.exceptions import ClientError

from lambdacheck.application.mocking.mock_lambda_data import MOCK_DATA

if TYPE_CHECKING:
    from mypy_boto3_lambda.client import LambdaClient
else:
    LambdaClient = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class MockLambdaAPIs(LambdaClient):
    def __init__(self) -> None:
        self.output_mapping: Dict[str, Any] = MOCK_DATA

    def get_function(self, *, FunctionName: str, Qualifier: str = "") -> Any:
        logger.info(f"Calling get_function in MockLambdaAPIs for {FunctionName}.")
        functions = self.output_mapping["get-function"]
        # Mirror the service: a full ARN resolves to the same function as its name.
        name = FunctionName.rsplit(":function:", 1)[-1]
        if name not in functions:
            raise ClientError(
                {
                    "Error": {
                        "Code": "ResourceNotFoundException",
                        "Message": f"Function not found: {FunctionName}",
                    },
                    "ResponseMetadata": {"HTTPStatusCode": 404},
                },
                "GetFunction",
            )
        return copy.deepcopy(functions[name])
