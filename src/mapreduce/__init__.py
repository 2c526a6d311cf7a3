# Import seq_ext to register Seq operations
from . import seq_ext  # noqa: F401
from .combinators import fold, join, simple_join, transform, where
from .config import DisplayConfig
from .display import format_list, print_list
from .errors import ConfigError, MapReduceError
from .kernel import Pair, Seq
from .log import setup_logger

__all__ = [
    # Operators
    "transform",
    "where",
    "fold",
    "simple_join",
    "join",
    # Types
    "Pair",
    "Seq",
    # Display
    "format_list",
    "print_list",
    "DisplayConfig",
    # Errors
    "MapReduceError",
    "ConfigError",
    "setup_logger",
]
