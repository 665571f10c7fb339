"""Result variants returned by controllers.

Controllers return one of these instead of framework response objects so
the HTTP layer (or any other host) decides how each one is rendered.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Created:
    """A new resource; `resource_id` is what the host builds a location from."""
    value: Any
    resource_id: str


@dataclass(frozen=True)
class NoContent:
    pass


@dataclass(frozen=True)
class NotFound:
    message: str


Outcome = Union[Ok, Created, NoContent, NotFound]
