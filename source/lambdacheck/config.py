"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import os
from typing import Mapping, Optional, Tuple

from lambdacheck.application.util.exceptions import InvalidSetting

EXAMPLE_DIR = "LAMBDACHECK_EXAMPLE_DIR"
TERRAFORM_BINARY = "LAMBDACHECK_TERRAFORM_BINARY"
HTTP_CONNECT_TIMEOUT = "LAMBDACHECK_HTTP_CONNECT_TIMEOUT"
HTTP_READ_TIMEOUT = "LAMBDACHECK_HTTP_READ_TIMEOUT"
AWS_CONNECT_TIMEOUT = "LAMBDACHECK_AWS_CONNECT_TIMEOUT"
AWS_READ_TIMEOUT = "LAMBDACHECK_AWS_READ_TIMEOUT"

DEFAULT_TERRAFORM_BINARY = "terraform"
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 30.0


class Settings:
    """
    Runtime settings for the acceptance checks, read from environment
    variables.

    Usage example:
        settings = Settings.from_environ()
        requests.get(url, timeout=settings.http_timeout)
    """

    def __init__(
        self,
        example_dir: Optional[str] = None,
        terraform_binary: str = DEFAULT_TERRAFORM_BINARY,
        http_connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        http_read_timeout: float = DEFAULT_READ_TIMEOUT,
        aws_connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        aws_read_timeout: float = DEFAULT_READ_TIMEOUT,
        region_name: Optional[str] = None,
    ) -> None:
        self.example_dir = example_dir
        self.terraform_binary = terraform_binary
        self.http_connect_timeout = http_connect_timeout
        self.http_read_timeout = http_read_timeout
        self.aws_connect_timeout = aws_connect_timeout
        self.aws_read_timeout = aws_read_timeout
        self.region_name = region_name

    @property
    def http_timeout(self) -> Tuple[float, float]:
        return (self.http_connect_timeout, self.http_read_timeout)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            example_dir=env.get(EXAMPLE_DIR) or None,
            terraform_binary=env.get(TERRAFORM_BINARY) or DEFAULT_TERRAFORM_BINARY,
            http_connect_timeout=_seconds(
                env, HTTP_CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT
            ),
            http_read_timeout=_seconds(env, HTTP_READ_TIMEOUT, DEFAULT_READ_TIMEOUT),
            aws_connect_timeout=_seconds(
                env, AWS_CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT
            ),
            aws_read_timeout=_seconds(env, AWS_READ_TIMEOUT, DEFAULT_READ_TIMEOUT),
            region_name=env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION"),
        )


def _seconds(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidSetting(name, raw)
    if value <= 0:
        raise InvalidSetting(name, raw)
    return value
