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
"""Interception core types: the per-field state record and install results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

Handler = Callable[[Any, str, Any], Any]
"""A chain handler: ``handler(obj, field_name, value) -> value``."""


@dataclass
class InterceptedField:
    """Augmented state for exactly one (object, field name) pair.

    Attributes:
        name: The intercepted field name.
        cached_value: Last value produced by a read or committed by a write.
        after_get_chain: Read transforms, run in insertion order.
        before_set_chain: Write transforms, run front to back. New handlers
            are inserted at the front, so the newest runs first.
        after_set_chain: Write observers, run in insertion order after a
            commit that changed the value.
        prior_reader: Zero-argument reader bound to the accessor that existed
            before interception, if any. Only used to seed the first read.
        seeded: Whether the first read or first commit has happened.
        mirrors_instance_dict: Keep the instance ``__dict__`` entry equal to
            ``cached_value`` so ``vars(obj)`` and module globals stay in step.
    """

    name: str
    cached_value: Any = None
    after_get_chain: list[Handler] = field(default_factory=list)
    before_set_chain: list[Handler] = field(default_factory=list)
    after_set_chain: list[Handler] = field(default_factory=list)
    prior_reader: Callable[[], Any] | None = None
    seeded: bool = False
    mirrors_instance_dict: bool = False


@dataclass(frozen=True)
class NotApplicable:
    """Result of an install call that was refused without raising.

    Falsy, so callers can branch with ``if not result:``.
    """

    obj: Any
    field: str
    reason: str

    def __bool__(self) -> bool:
        return False
