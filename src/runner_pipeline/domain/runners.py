# domain/runners.py
from typing import Callable

# Destino de cada línea de salida (por defecto, print a stdout)
LineWriter = Callable[[str], None]


class IRunner:
    """
    Marca de capacidad: identifica una clase como runner (handler de caso de uso).
    No define ningún contrato de comportamiento; cada runner expone sus propios métodos.
    """
    pass
