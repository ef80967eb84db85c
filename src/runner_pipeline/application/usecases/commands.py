from runner_pipeline.domain import IRunner, LineWriter


class UseCase1Command(IRunner):
    """Comando de saludo: escribe una línea y no devuelve nada."""
    def __init__(self, writer: LineWriter = print):
        self.writer = writer

    def hi(self) -> None:
        self.writer("Hello World!!!")


class UseCase2Command(IRunner):
    """Comando de despedida."""
    def __init__(self, writer: LineWriter = print):
        self.writer = writer

    def bye(self) -> None:
        self.writer("Goodbye!!!")
