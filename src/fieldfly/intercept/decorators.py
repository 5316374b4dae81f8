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
"""Decorator forms of the install calls.

Usage::

    @after_set(order, "status")
    def publish(obj, field, value):
        events.append((field, value))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from fieldfly.intercept.interceptor import FieldInterceptor, get_default_interceptor
from fieldfly.intercept.types import NotApplicable
from fieldfly.kernel.exceptions import NotApplicableException

F = TypeVar("F", bound=Callable[..., Any])


def _make_hook(hook: str) -> Callable[..., Callable[[F], F]]:
    """Create a decorator factory that installs the wrapped function as a *hook* handler.

    The factory takes ``(obj, field)`` and an optional ``interceptor``
    keyword (the shared default interceptor when omitted). The decorated
    function is returned unchanged. An install refused with
    :class:`NotApplicable` raises :class:`NotApplicableException`, since a
    decorator has nowhere to return the result.
    """

    def factory(obj: Any, field: str, *, interceptor: FieldInterceptor | None = None) -> Callable[[F], F]:
        def decorator(fn: F) -> F:
            target = interceptor if interceptor is not None else get_default_interceptor()
            result = getattr(target, hook)(obj, field, fn)
            if isinstance(result, NotApplicable):
                raise NotApplicableException(
                    result.reason,
                    code="INTERCEPT_NOT_APPLICABLE",
                    context={"field": field, "hook": hook},
                )
            return fn

        return decorator

    return factory


after_get = _make_hook("after_get")
before_set = _make_hook("before_set")
after_set = _make_hook("after_set")
