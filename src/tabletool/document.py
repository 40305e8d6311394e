"""Document: the result of evaluating a table chunk."""

from __future__ import annotations

from dataclasses import dataclass, field

from .environment import Environment
from .values import Nil, Value


@dataclass
class Document:
    """Holds the environment and the value produced by ``return``."""

    environment: Environment = field(default_factory=Environment)
    result: Value = Nil
    returned: bool = False

    @property
    def locals_(self) -> dict[str, Value]:
        return self.environment.locals_

    @property
    def globals_(self) -> dict[str, Value]:
        return self.environment.globals_
