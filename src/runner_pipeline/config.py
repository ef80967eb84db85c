# config.py
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

LOG_LEVEL_ENV = "RUNNER_PIPELINE_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class PipelineSettings(BaseModel):
    """
    Configuración estática de la pipeline: textos de los marcadores y nivel de log.
    Los valores por defecto reproducen exactamente los marcadores
    ``##### Send -> Before Runner #####`` / ``##### Get -> After Runner #####``.
    """
    model_config = ConfigDict(frozen=True)

    send_label: str = "Send"
    get_label: str = "Get"
    before_label: str = "Before"
    after_label: str = "After"
    marker_template: str = "##### {verb} -> {stage} {name} #####"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Nivel de log desconocido: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PipelineSettings":
        """Crea la configuración aplicando los overrides presentes en el entorno."""
        environ = os.environ if environ is None else environ
        overrides = {}
        if environ.get(LOG_LEVEL_ENV):
            overrides["log_level"] = environ[LOG_LEVEL_ENV]
        return cls(**overrides)

    def marker(self, verb: str, stage: str, name: str) -> str:
        return self.marker_template.format(verb=verb, stage=stage, name=name)
