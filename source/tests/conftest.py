"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import json
import typing

import pytest

FUNCTION_NAME = "f"
FUNCTION_ARN = "arn:aws:lambda:us-east-1:123456789012:function:f"
FUNCTION_URL = "https://x.lambda-url.us-east-1.on.aws/"


@pytest.fixture
def terraform_output_document() -> typing.Dict[str, typing.Any]:
    return {
        "lambda_function_arn": {
            "sensitive": False,
            "type": "string",
            "value": FUNCTION_ARN,
        },
        "lambda_function_name": {
            "sensitive": False,
            "type": "string",
            "value": FUNCTION_NAME,
        },
        "lambda_function_url": {
            "sensitive": False,
            "type": "string",
            "value": FUNCTION_URL,
        },
        "lambda_function_tags": {
            "sensitive": False,
            "type": ["map", "string"],
            "value": {"provisioner": "Terraform"},
        },
    }


@pytest.fixture
def terraform_output_json(
    terraform_output_document: typing.Dict[str, typing.Any]
) -> str:
    return json.dumps(terraform_output_document)
