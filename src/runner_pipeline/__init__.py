from runner_pipeline.config import PipelineSettings
from runner_pipeline.domain import IRunner, RunnerPipelineError, ServiceNotRegisteredError
from runner_pipeline.application.pipeline import IPipeline, Pipeline
from runner_pipeline.application.factory import ServiceProvider, build_provider

__all__ = [
    "IPipeline",
    "IRunner",
    "Pipeline",
    "PipelineSettings",
    "RunnerPipelineError",
    "ServiceNotRegisteredError",
    "ServiceProvider",
    "build_provider",
]

__version__ = "0.1.0"
