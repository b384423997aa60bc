from __future__ import annotations

from dataclasses import dataclass


VARIADIC_MARKER = "..."


@dataclass(frozen=True)
class Recipe:
    name: str
    parameters: tuple[str, ...]
    variadic: bool
    signature: str
    body: str

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def canonical_signature(self) -> str:
        tokens = [self.name, *self.parameters]
        if self.variadic:
            tokens.append(VARIADIC_MARKER)
        return " ".join(tokens)


Cookbook = tuple[Recipe, ...]
