import logging
import sys

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_HANDLER_NAME = "tarefas-console"


def configurar_logging(level: str | int = "info") -> None:
    """
    Configura o logger raiz com um handler de console.

    Pode ser chamada mais de uma vez (ex.: uma app por teste): o handler só é
    instalado na primeira chamada, as seguintes apenas ajustam o nível.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    handler.set_name(_HANDLER_NAME)
    root.addHandler(handler)
