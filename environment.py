"""Variable environment shared by every statement of a session.

`Environment` maps variable names to their last-assigned integer value. A
variable exists only once it has been assigned; looking it up earlier raises
`UndefinedVariableError`. One environment is created per session and passed
explicitly to the evaluator; there is no module-level state.
"""

from __future__ import annotations
from typing import Dict
from errors import UndefinedVariableError


class Environment:
    def __init__(self):
        self.variables: Dict[str, int] = {}

    def assign(self, name: str, value: int) -> None:
        """Bind `name` to `value`, replacing any earlier value."""
        self.variables[name] = value

    def lookup(self, name: str) -> int:
        """Return the value of `name`; it must have been assigned."""
        if name in self.variables:
            return self.variables[name]
        raise UndefinedVariableError(name)

    def exists(self, name: str) -> bool:
        return name in self.variables

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of the current bindings."""
        return dict(self.variables)

    def clear(self) -> None:
        self.variables.clear()

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __len__(self) -> int:
        return len(self.variables)

    def __repr__(self) -> str:
        return f"Environment({self.variables})"
