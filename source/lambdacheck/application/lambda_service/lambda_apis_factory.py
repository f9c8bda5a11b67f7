"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Optional

import boto3
from botocore.config import Config

from lambdacheck.application.mocking.mock_lambda_apis import MockLambdaAPIs
from lambdacheck.application.util.exceptions import CredentialsNotConfigured
from lambdacheck.config import Settings

if TYPE_CHECKING:
    from mypy_boto3_lambda.client import LambdaClient
else:
    LambdaClient = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class LambdaAPIsFactory:
    """
    This class is used to create an instance from either the actual Lambda
    or the mock APIs, depending on the passed parameter 'mock'

    Usage example:
    - For real Lambda APIs
        lambda_client = LambdaAPIsFactory.create_instance(settings)
        lambda_client.get_function(FunctionName=name)
    - For Mock Lambda APIs
        mock_lambda = LambdaAPIsFactory.create_instance(mock=True)
        mock_lambda.get_function(FunctionName="example-function")
    """

    @staticmethod
    def create_instance(
        settings: Optional[Settings] = None, mock: bool = False
    ) -> LambdaClient:
        if mock:
            return MockLambdaAPIs()
        settings = settings or Settings.from_environ()
        session = boto3.session.Session(region_name=settings.region_name)
        if session.get_credentials() is None:
            raise CredentialsNotConfigured()
        logger.info(f"Creating lambda client in region {session.region_name}")
        client: LambdaClient = session.client(
            "lambda",
            config=Config(
                connect_timeout=settings.aws_connect_timeout,
                read_timeout=settings.aws_read_timeout,
                retries={"total_max_attempts": 1, "mode": "standard"},
            ),
        )
        return client
