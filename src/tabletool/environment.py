"""Variable scope used while evaluating a table chunk."""

from __future__ import annotations

from dataclasses import dataclass, field

from .values import Nil, Value


@dataclass
class Environment:
    """Holds the variables assigned during evaluation."""

    locals_: dict[str, Value] = field(default_factory=dict)
    globals_: dict[str, Value] = field(default_factory=dict)

    def declare_local(self, name: str, value: Value = Nil) -> None:
        self.locals_[name] = value

    def assign(self, name: str, value: Value) -> None:
        """``name = value``: updates a local if declared, else a global."""
        if name in self.locals_:
            self.locals_[name] = value
        else:
            self.globals_[name] = value

    def lookup(self, name: str) -> Value:
        if name in self.locals_:
            return self.locals_[name]
        return self.globals_.get(name, Nil)
