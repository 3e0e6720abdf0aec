from __future__ import annotations

from typing import Protocol, TypeVar

S = TypeVar("S")
_StateContra_contra = TypeVar("_StateContra_contra", contravariant=True)


class HeuristicFn(Protocol[_StateContra_contra]):
    def __call__(self, state: _StateContra_contra) -> float: ...


class GoalTest(Protocol[_StateContra_contra]):
    def __call__(self, state: _StateContra_contra) -> bool: ...
