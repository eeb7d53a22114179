"""Config secrets bound into Lambda environments at deploy time.

A ``ConfigSecret`` is a named value that a function declares it needs.
Binding one to a function copies the value into the function's
environment under the secret's name.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Iterable
from typing import Mapping
from typing import Optional


@dataclass(frozen=True)
class ConfigSecret:
    """A named secret value bound to a function."""

    name: str
    value: str = field(repr=False)
    type: str = field(default="secret", init=False)


def create_config_secret(name: str, value: str) -> ConfigSecret:
    return ConfigSecret(name=name, value=value)


def is_config_secret(item: Any) -> bool:
    return isinstance(item, ConfigSecret) or (
        getattr(item, "type", None) == "secret"
        and isinstance(getattr(item, "name", None), str)
        and isinstance(getattr(item, "value", None), str)
    )


def build_environment(
    stage: str,
    region: str,
    env: Optional[Mapping[str, str]] = None,
    bind: Optional[Iterable[Any]] = None,
) -> dict[str, str]:
    """Merge the runtime environment for a function.

    Order of precedence, lowest first: ``STAGE``/``REGION`` defaults,
    explicit ``env`` entries, then bound config secrets. Bound items
    that are not config secrets do not touch the environment.

    Args:
        stage: Deployment stage name.
        region: Deployment region.
        env: Function-specific environment variables.
        bind: Resources linked to the function.

    Returns:
        The merged environment mapping.
    """
    environment: dict[str, str] = {"STAGE": stage, "REGION": region}
    environment.update(env or {})

    for item in bind or ():
        if is_config_secret(item):
            environment[item.name] = item.value

    return environment
