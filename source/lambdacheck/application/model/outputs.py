"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Any, Mapping

from lambdacheck.application.util.exceptions import TerraformOutputError


class OutputKeys:
    LAMBDA_FUNCTION_ARN = "lambda_function_arn"
    LAMBDA_FUNCTION_NAME = "lambda_function_name"
    LAMBDA_FUNCTION_URL = "lambda_function_url"


class InfrastructureOutputs:
    def __init__(self, function_arn: str, function_name: str, function_url: str):
        self._function_arn = function_arn
        self._function_name = function_name
        self._function_url = function_url

    @property
    def function_arn(self) -> str:
        return self._function_arn

    @property
    def function_name(self) -> str:
        return self._function_name

    @property
    def function_url(self) -> str:
        return self._function_url

    @classmethod
    def from_mapping(cls, outputs: Mapping[str, Any]) -> "InfrastructureOutputs":
        return cls(
            function_arn=_required_string(outputs, OutputKeys.LAMBDA_FUNCTION_ARN),
            function_name=_required_string(outputs, OutputKeys.LAMBDA_FUNCTION_NAME),
            function_url=_required_string(outputs, OutputKeys.LAMBDA_FUNCTION_URL),
        )

    def as_dict(self) -> dict[str, str]:
        return {
            OutputKeys.LAMBDA_FUNCTION_ARN: self.function_arn,
            OutputKeys.LAMBDA_FUNCTION_NAME: self.function_name,
            OutputKeys.LAMBDA_FUNCTION_URL: self.function_url,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InfrastructureOutputs):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"InfrastructureOutputs({self.as_dict()!r})"


def _required_string(outputs: Mapping[str, Any], key: str) -> str:
    if key not in outputs:
        raise TerraformOutputError(key, "is missing")
    value = outputs[key]
    if not isinstance(value, str):
        raise TerraformOutputError(key, f"is not a string: {value!r}")
    if value == "":
        raise TerraformOutputError(key, "is empty")
    return value
