"""Indentation state owned by a facade instance."""
from __future__ import annotations


class Indentation:
    def __init__(self, unit: str = "    ") -> None:
        self.unit = unit
        self._depth = 0
        self._prefix = ""

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def prefix(self) -> str:
        return self._prefix

    def indent(self) -> None:
        self._depth += 1
        self._resolve()

    def dedent(self) -> None:
        if self._depth > 0:
            self._depth -= 1
        self._resolve()

    def reset(self) -> None:
        self._depth = 0
        self._resolve()

    def apply(self, message: object) -> str:
        return self._prefix + str(message)

    def _resolve(self) -> None:
        self._prefix = self.unit * self._depth


__all__ = ["Indentation"]
