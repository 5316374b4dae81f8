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
"""FieldRegistry: the side-table of InterceptedField records.

Records are keyed by (object identity, field name). Interception gives every
intercepted object its own woven class (see :mod:`fieldfly.intercept.weaver`),
so the table for one object lives on that class and is reclaimed with it.
"""

from __future__ import annotations

from typing import Any

from fieldfly.intercept.types import InterceptedField
from fieldfly.intercept.weaver import FIELDS_ATTR, weave_instance
from fieldfly.kernel.exceptions import InterceptionException


class FieldRegistry:
    """Owns InterceptedField records; records are looked up, never re-created.

    Usage::

        registry = FieldRegistry()
        record, created = registry.get_or_create(obj, "x")
        assert registry.find(obj, "x") is record
    """

    def is_woven(self, obj: Any) -> bool:
        """Return True if *obj* already carries a woven class."""
        return FIELDS_ATTR in vars(type(obj))

    def find(self, obj: Any, name: str) -> InterceptedField | None:
        """Return the record for ``obj.name``, or None if it is not intercepted."""
        table = vars(type(obj)).get(FIELDS_ATTR)
        if table is None:
            return None
        return table.get(name)

    def lookup(self, obj: Any, name: str) -> InterceptedField:
        """Return the record for ``obj.name``; the field must be intercepted."""
        record = self.find(obj, name)
        if record is None:
            raise InterceptionException(
                f"{type(obj).__qualname__}.{name} is not intercepted",
                code="INTERCEPT_MISSING",
                context={"field": name},
            )
        return record

    def get_or_create(self, obj: Any, name: str) -> tuple[InterceptedField, bool]:
        """Return ``(record, created)`` for ``obj.name``, weaving *obj* if needed."""
        record = self.find(obj, name)
        if record is not None:
            return record, False
        table: dict[str, InterceptedField] = getattr(weave_instance(obj), FIELDS_ATTR)
        record = table[name] = InterceptedField(name=name)
        return record, True
