# application/pipeline/protocols.py
from typing import Callable, Protocol, TypeVar

TRunner = TypeVar("TRunner")
R = TypeVar("R")


class IPipeline(Protocol[TRunner]):
    def send(self, action: Callable[[TRunner], None]) -> None:
      ...

    def get(self, action: Callable[[TRunner], R]) -> R:
      ...
