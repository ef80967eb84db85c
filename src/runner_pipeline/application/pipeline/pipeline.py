# application/pipeline/pipeline.py
import logging
from typing import Callable, Optional

from runner_pipeline.config import PipelineSettings
from runner_pipeline.domain import LineWriter
from .protocols import IPipeline, R, TRunner

logger = logging.getLogger(__name__)


class Pipeline(IPipeline[TRunner]):
    """
    Envoltorio alrededor de un único runner: escribe un marcador "Before",
    delega en la acción recibida y escribe un marcador "After".

    - ``send`` para acciones sin resultado (comandos).
    - ``get`` para acciones que devuelven un valor (consultas).

    Las excepciones de la acción se propagan sin tocar; en ese caso
    el marcador "After" no se escribe.
    """
    def __init__(
        self,
        runner: TRunner,
        *,
        name: Optional[str] = None,
        settings: Optional[PipelineSettings] = None,
        writer: LineWriter = print,
    ):
        self._runner = runner
        self._name = name or type(runner).__name__
        self._settings = settings or PipelineSettings()
        self._writer = writer

    @property
    def runner(self) -> TRunner:
        return self._runner

    @property
    def name(self) -> str:
        return self._name

    def send(self, action: Callable[[TRunner], None]) -> None:
        verb = self._settings.send_label
        self._before(verb)
        logger.debug("Invocando acción sin resultado sobre %s", self._name)
        action(self._runner)
        self._after(verb)

    def get(self, action: Callable[[TRunner], R]) -> R:
        verb = self._settings.get_label
        self._before(verb)
        logger.debug("Invocando acción con resultado sobre %s", self._name)
        result = action(self._runner)
        logger.debug("Resultado de %s: %r", self._name, result)
        self._after(verb)

        return result

    def _before(self, verb: str) -> None:
        self._writer(self._settings.marker(verb, self._settings.before_label, self._name))

    def _after(self, verb: str) -> None:
        self._writer(self._settings.marker(verb, self._settings.after_label, self._name))

    def __repr__(self) -> str:
        return f"Pipeline({self._name})"
