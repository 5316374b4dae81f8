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
"""Interception configuration properties."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from fieldfly.core.config import config_properties

ChangeDetection = Literal["strict", "identity", "equality"]


@config_properties(prefix="fieldfly.intercept")
class InterceptProperties(BaseModel):
    """Configuration for field interception (fieldfly.intercept.*).

    Attributes:
        change_detection: How a commit decides whether after-set handlers
            run. ``strict`` compares scalars by value and everything else by
            identity; ``identity`` always uses ``is``; ``equality`` uses ``==``.
        trace_accesses: Emit a debug log event for every intercepted read
            and write.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    change_detection: ChangeDetection = "strict"
    trace_accesses: bool = False
