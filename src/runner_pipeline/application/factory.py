# application/factory.py

from __future__ import annotations

import logging
from typing import Dict, Optional, Type, TypeVar

from runner_pipeline.config import PipelineSettings
from runner_pipeline.domain import IRunner, LineWriter, ServiceNotRegisteredError
from runner_pipeline.application.pipeline import Pipeline
from runner_pipeline.application.usecases import (
    UseCase1Command,
    UseCase2Command,
    UseCase1Query,
    UseCase2Query,
)

TRunner = TypeVar("TRunner", bound=IRunner)

logger = logging.getLogger(__name__)


class ServiceProvider:
    """
    Registro explícito de runners (composition root).

    - Cada runner se registra como singleton: una única instancia compartida.
    - Cada pipeline es transitoria: se construye una nueva en cada ``get_pipeline``,
      siempre sobre el singleton registrado para ese tipo.
    """
    def __init__(self, settings: Optional[PipelineSettings] = None, writer: LineWriter = print):
        self.settings = settings or PipelineSettings()
        self.writer = writer
        self._singletons: Dict[type, IRunner] = {}

    def add_singleton(self, runner_type: Type[TRunner], instance: Optional[TRunner] = None) -> ServiceProvider:
        if not (isinstance(runner_type, type) and issubclass(runner_type, IRunner)):
            raise TypeError(f"{runner_type!r} no es un IRunner")
        if instance is None:
            instance = runner_type()
        elif not isinstance(instance, runner_type):
            raise TypeError(f"{instance!r} no es una instancia de {runner_type.__name__}")

        self._singletons[runner_type] = instance
        logger.debug("Runner registrado: %s", runner_type.__name__)
        return self

    def get_required(self, runner_type: Type[TRunner]) -> TRunner:
        try:
            return self._singletons[runner_type]
        except KeyError:
            raise ServiceNotRegisteredError(runner_type) from None

    def get_pipeline(self, runner_type: Type[TRunner]) -> Pipeline[TRunner]:
        runner = self.get_required(runner_type)
        return Pipeline(
            runner,
            name=runner_type.__name__,
            settings=self.settings,
            writer=self.writer,
        )

    def __contains__(self, runner_type: object) -> bool:
        return runner_type in self._singletons


def build_provider(
    settings: Optional[PipelineSettings] = None,
    writer: LineWriter = print,
) -> ServiceProvider:
    """
    Composición de los runners de la aplicación.
    Quien llame puede inyectar:
      - settings: textos de los marcadores y nivel de log
      - writer:   destino de las líneas de salida (por defecto, stdout)
    """
    provider = ServiceProvider(settings=settings, writer=writer)
    return (
        provider
        .add_singleton(UseCase1Command, UseCase1Command(writer=writer))
        .add_singleton(UseCase2Command, UseCase2Command(writer=writer))
        .add_singleton(UseCase1Query, UseCase1Query(writer=writer))
        .add_singleton(UseCase2Query, UseCase2Query(writer=writer))
    )
