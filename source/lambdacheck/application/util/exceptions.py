"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Sequence


class CredentialsNotConfigured(Exception):
    def __init__(self) -> None:
        self.message = "unable to load SDK config, no AWS credentials could be resolved."
        super().__init__(self.message)


class InvalidSetting(Exception):
    def __init__(self, name: str, value: str) -> None:
        self.message = f"Setting {name} has an invalid value: {value!r}"
        super().__init__(self.message)


class TerraformCommandFailed(Exception):
    def __init__(self, command: Sequence[str], returncode: int, stderr: str) -> None:
        self.message = f"Command {' '.join(command)} exited with status {returncode}: {stderr.strip()}"
        super().__init__(self.message)


class TerraformOutputError(Exception):
    def __init__(self, key: str, reason: str) -> None:
        self.message = f"Terraform output {key} {reason}"
        super().__init__(self.message)
