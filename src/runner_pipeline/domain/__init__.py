from .runners import IRunner, LineWriter
from .exceptions import RunnerPipelineError, ServiceNotRegisteredError

__all__ = [
    "IRunner",
    "LineWriter",
    "RunnerPipelineError",
    "ServiceNotRegisteredError",
]
