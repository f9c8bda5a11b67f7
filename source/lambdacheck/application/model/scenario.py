"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import enum
from typing import Optional

EXAMPLES_PREFIX = "examples"


class Scenario(enum.Enum):
    FOLDER_SOURCE = "source_from_folder"
    ZIP_SOURCE = "source_from_zip"

    @property
    def marker(self) -> str:
        # The deployed example echoes its own path back in the response body.
        return f"{EXAMPLES_PREFIX}/{self.value}"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Scenario"]:
        for scenario in cls:
            if scenario.value == name:
                return scenario
        return None

