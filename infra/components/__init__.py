"""Reusable CDK constructs."""

from infra.components.base_function import BaseFunction

__all__ = ["BaseFunction"]
