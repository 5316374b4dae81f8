"""Typed configuration property classes for each fieldfly subsystem."""

from fieldfly.config.properties.intercept import InterceptProperties

__all__ = [
    "InterceptProperties",
]
