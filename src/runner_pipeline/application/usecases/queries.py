from runner_pipeline.domain import IRunner, LineWriter


class UseCase1Query(IRunner):
    """
    Consulta: escribe la pregunta y devuelve la respuesta como resultado.
    """
    def __init__(self, writer: LineWriter = print):
        self.writer = writer

    def how_are_you(self) -> str:
        self.writer("How are you?")
        return "I'm fine, thank you!"


class UseCase2Query(IRunner):
    def __init__(self, writer: LineWriter = print):
        self.writer = writer

    def where_are_you_from(self) -> str:
        self.writer("Where are you from?")
        return "I'm from Portugal!"
