"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import json
import logging
import os
import subprocess
from typing import Any, Dict, List, Mapping, Optional

from lambdacheck.application.util.exceptions import (
    TerraformCommandFailed,
    TerraformOutputError,
)

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class TerraformOptions:
    """
    Points at an applied Terraform working directory and reads its outputs.

    Outputs are fetched once with `terraform output -no-color -json` and
    cached, so every check in a run sees the same values.
    """

    def __init__(
        self,
        terraform_dir: str,
        terraform_binary: str = "terraform",
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.terraform_dir = terraform_dir
        self.terraform_binary = terraform_binary
        self.env = dict(env or {})
        self._outputs: Optional[Dict[str, Any]] = None

    def output_command(self) -> List[str]:
        return [self.terraform_binary, "output", "-no-color", "-json"]

    def output_all(self) -> Dict[str, Any]:
        if self._outputs is None:
            self._outputs = self._read_outputs()
        return self._outputs

    def output(self, key: str) -> str:
        outputs = self.output_all()
        if key not in outputs:
            raise TerraformOutputError(key, "is missing")
        value = outputs[key]
        if not isinstance(value, str):
            raise TerraformOutputError(key, f"is not a string: {value!r}")
        return value

    def _read_outputs(self) -> Dict[str, Any]:
        command = self.output_command()
        logger.info(f"Reading terraform outputs from {self.terraform_dir}")
        try:
            completed = subprocess.run(
                command,
                cwd=self.terraform_dir,
                env={**os.environ, **self.env},
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            # 127 is the shell's status for a command that could not be run.
            raise TerraformCommandFailed(command, 127, str(e)) from e
        if completed.returncode != 0:
            raise TerraformCommandFailed(command, completed.returncode, completed.stderr)
        return parse_outputs(completed.stdout)


def parse_outputs(raw: str) -> Dict[str, Any]:
    # Each output is wrapped as {"sensitive": ..., "type": ..., "value": ...}.
    try:
        document = json.loads(raw) if raw.strip() else {}
    except json.JSONDecodeError as e:
        raise TerraformOutputError("document", f"is not valid JSON: {e}")
    if not isinstance(document, dict):
        raise TerraformOutputError("document", "is not a JSON object")
    outputs: Dict[str, Any] = {}
    for key, wrapped in document.items():
        if not isinstance(wrapped, dict) or "value" not in wrapped:
            raise TerraformOutputError(key, "has no value")
        outputs[key] = wrapped["value"]
    logger.debug(f"Terraform outputs available: {sorted(outputs)}")
    return outputs
