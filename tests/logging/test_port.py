# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for the LoggingPort protocol."""

from typing import Any

from fieldfly.core.config import Config
from fieldfly.logging.port import LoggingPort


class _RecordingLogging:
    def __init__(self) -> None:
        self.levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        pass

    def get_logger(self, name: str) -> Any:
        return name

    def set_level(self, name: str, level: str) -> None:
        self.levels[name] = level


class TestLoggingPort:
    def test_structural_implementation_satisfies_port(self):
        assert isinstance(_RecordingLogging(), LoggingPort)

    def test_incomplete_implementation_rejected(self):
        class NoLevels:
            def configure(self, config: Config) -> None:
                pass

            def get_logger(self, name: str) -> Any:
                return None

        assert not isinstance(NoLevels(), LoggingPort)
