from .mocks import make_response, RecordingSend
from .factories import mk_storage_move, mk_project

__all__ = [
    "make_response",
    "RecordingSend",
    "mk_storage_move",
    "mk_project",
]
