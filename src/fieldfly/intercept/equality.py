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
"""Change detection for committed writes."""

from __future__ import annotations

from typing import Any

from fieldfly.config.properties.intercept import ChangeDetection

_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)
_NUMERIC_TYPES = (int, float, complex)


def strict_equals(a: Any, b: Any) -> bool:
    """Strict equality: scalars by value, everything else by identity.

    ``bool`` never equals a number, ``str`` never equals ``bytes``, and
    ``NaN`` is not equal to itself. Containers and other objects are equal
    only when they are the same object, so mutating a list in place and
    writing it back is not a change.
    """
    if a is b:
        return not _is_nan(a)
    if not (isinstance(a, _SCALAR_TYPES) and isinstance(b, _SCALAR_TYPES)):
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, _NUMERIC_TYPES) and isinstance(b, _NUMERIC_TYPES):
        return a == b
    return type(a) is type(b) and a == b


def values_differ(new: Any, old: Any, mode: ChangeDetection = "strict") -> bool:
    """Return True when committing *new* over *old* counts as a change."""
    if mode == "identity":
        return new is not old
    if mode == "equality":
        return bool(new != old)
    return not strict_equals(new, old)


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return value != value
    if isinstance(value, complex):
        return value.real != value.real or value.imag != value.imag
    return False
