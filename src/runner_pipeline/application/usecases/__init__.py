from .commands import UseCase1Command, UseCase2Command
from .queries import UseCase1Query, UseCase2Query

__all__ = [
    "UseCase1Command",
    "UseCase2Command",
    "UseCase1Query",
    "UseCase2Query",
]
