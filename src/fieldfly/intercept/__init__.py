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
"""Field interception: ordered hook chains on object field reads and writes.

Import explicitly::

    from fieldfly.intercept import install_after_get, install_before_set, install_after_set
"""

from fieldfly.intercept.decorators import after_get, after_set, before_set
from fieldfly.intercept.equality import strict_equals, values_differ
from fieldfly.intercept.interceptor import (
    FieldInterceptor,
    get_default_interceptor,
    install_after_get,
    install_after_set,
    install_before_set,
)
from fieldfly.intercept.registry import FieldRegistry
from fieldfly.intercept.types import Handler, InterceptedField, NotApplicable
from fieldfly.intercept.weaver import InterceptedAttribute, weave_instance

__all__ = [
    "FieldInterceptor",
    "FieldRegistry",
    "Handler",
    "InterceptedAttribute",
    "InterceptedField",
    "NotApplicable",
    "after_get",
    "after_set",
    "before_set",
    "get_default_interceptor",
    "install_after_get",
    "install_after_set",
    "install_before_set",
    "strict_equals",
    "values_differ",
    "weave_instance",
]
