"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import io
import json
import os
import subprocess
import typing
import zipfile
from unittest.mock import patch

import boto3
import pytest

from moto import mock_aws  # type: ignore

from lambdacheck.application.context.test_context import TestContext
from lambdacheck.application.terraform.options import TerraformOptions

if typing.TYPE_CHECKING:
    from mypy_boto3_iam import IAMClient
    from mypy_boto3_lambda import LambdaClient
    from mypy_boto3_lambda.type_defs import FunctionConfigurationResponseTypeDef
else:
    IAMClient = object
    LambdaClient = object
    FunctionConfigurationResponseTypeDef = object

HANDLER_SOURCE = """
def lambda_handler(event, context):
    return {"statusCode": 200, "body": "Hello from examples/source_from_folder"}
"""


@pytest.fixture(scope="module")
def aws_credentials() -> None:
    """Mocked AWS Credentials for moto"""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    os.environ["AWS_REGION"] = "us-east-1"


@pytest.fixture(scope="module")
def iam_client(aws_credentials: None) -> typing.Iterator[IAMClient]:
    with mock_aws():
        connection: IAMClient = boto3.client("iam", region_name="us-east-1")
        yield connection


@pytest.fixture(scope="module")
def lambda_client(iam_client: IAMClient) -> LambdaClient:
    # Shares the moto context opened by iam_client.
    connection: LambdaClient = boto3.client("lambda", region_name="us-east-1")
    return connection


@pytest.fixture(scope="module")
def lambda_role_arn(iam_client: IAMClient) -> str:
    role = iam_client.create_role(
        RoleName="lambda-function-role",
        AssumeRolePolicyDocument=json.dumps(
            {
                "Version": "2012-10-17",
                "Statement": [
                    {
                        "Effect": "Allow",
                        "Principal": {"Service": "lambda.amazonaws.com"},
                        "Action": "sts:AssumeRole",
                    }
                ],
            }
        ),
    )
    return role["Role"]["Arn"]


@pytest.fixture(scope="module")
def deployed_function(
    lambda_client: LambdaClient, lambda_role_arn: str
) -> FunctionConfigurationResponseTypeDef:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("index.py", HANDLER_SOURCE)
    return lambda_client.create_function(
        FunctionName="source-from-folder",
        Runtime="python3.9",
        Role=lambda_role_arn,
        Handler="index.lambda_handler",
        Code={"ZipFile": buffer.getvalue()},
    )


@pytest.fixture
def terraform_run(terraform_output_json: str) -> typing.Iterator[typing.Any]:
    completed = subprocess.CompletedProcess(
        args=["terraform", "output", "-no-color", "-json"],
        returncode=0,
        stdout=terraform_output_json,
        stderr="",
    )
    with patch(
        "lambdacheck.application.terraform.options.subprocess.run",
        return_value=completed,
    ) as run:
        yield run


@pytest.fixture
def folder_context(terraform_run: typing.Any) -> TestContext:
    return TestContext(TerraformOptions("examples/source_from_folder"))


@pytest.fixture
def zip_context(terraform_run: typing.Any) -> TestContext:
    return TestContext(TerraformOptions("examples/source_from_zip"))
