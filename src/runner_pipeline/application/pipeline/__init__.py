from .protocols import IPipeline
from .pipeline import Pipeline

__all__ = [
    "IPipeline",
    "Pipeline",
]
