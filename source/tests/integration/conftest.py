"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import typing

import pytest

from lambdacheck.application.context.test_context import TestContext
from lambdacheck.application.lambda_service.lambda_apis_factory import (
    LambdaAPIsFactory,
)
from lambdacheck.application.model.outputs import InfrastructureOutputs
from lambdacheck.config import Settings

if typing.TYPE_CHECKING:
    from mypy_boto3_lambda import LambdaClient
else:
    LambdaClient = object


@pytest.fixture(scope="package")
def settings() -> Settings:
    return Settings.from_environ()


@pytest.fixture(scope="package")
def context(settings: Settings) -> TestContext:
    if settings.example_dir is None:
        pytest.skip("LAMBDACHECK_EXAMPLE_DIR does not point at an applied example")
    return TestContext.for_example(settings.example_dir, settings)


@pytest.fixture(scope="package")
def outputs(context: TestContext) -> InfrastructureOutputs:
    return InfrastructureOutputs.from_mapping(
        context.terraform_options().output_all()
    )


@pytest.fixture(scope="package")
def lambda_client(settings: Settings) -> LambdaClient:
    return LambdaAPIsFactory.create_instance(settings)
