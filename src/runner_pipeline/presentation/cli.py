import logging
from typing import List

from runner_pipeline.config import LOG_FORMAT, PipelineSettings
from runner_pipeline.application.factory import ServiceProvider, build_provider
from runner_pipeline.application.usecases import (
    UseCase1Command,
    UseCase2Command,
    UseCase1Query,
    UseCase2Query,
)


def configure_logging(settings: PipelineSettings) -> None:
    # Los logs van a stderr; stdout queda solo para los marcadores
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler()
        ]
    )


def run(provider: ServiceProvider) -> List[str]:
    """
    Ejecuta los cuatro casos de uso a través de sus pipelines
    y devuelve las respuestas de las consultas.
    """
    command1 = provider.get_pipeline(UseCase1Command)
    command1.send(lambda r: r.hi())

    command2 = provider.get_pipeline(UseCase2Command)
    command2.send(lambda r: r.bye())

    query1 = provider.get_pipeline(UseCase1Query)
    answer1 = query1.get(lambda r: r.how_are_you())
    provider.writer(answer1)

    query2 = provider.get_pipeline(UseCase2Query)
    answer2 = query2.get(lambda r: r.where_are_you_from())
    provider.writer(answer2)

    return [answer1, answer2]


def main() -> int:
    settings = PipelineSettings.from_env()
    configure_logging(settings)
    logging.getLogger(__name__).debug("Configuración cargada: %s", settings)

    run(build_provider(settings=settings))
    return 0
