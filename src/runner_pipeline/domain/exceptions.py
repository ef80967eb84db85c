
class RunnerPipelineError(Exception):
    """Base exception for runner-pipeline errors."""
    pass

class ServiceNotRegisteredError(RunnerPipelineError, LookupError):
    """Raised when a runner type was never registered in the provider."""

    def __init__(self, runner_type: type):
        self.runner_type = runner_type
        super().__init__(f"No hay ningún runner registrado para {runner_type.__name__}")
