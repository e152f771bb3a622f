# src/exception_transformer/core/logging/
# ├─ __init__.py            # public API: setup_logging, exception-type helpers
# ├─ builder.py             # make_dict_config(settings) + setup_logging(settings)
# ├─ formatters.py          # JsonFormatter, ColorFormatter
# ├─ filters.py             # ExceptionTypeFilter (+ contextvar helpers), RedactFilter
# └─ handlers.py            # handler config factories (console/file)


from .builder import setup_logging, make_dict_config
from .filters import (
    set_exception_type,
    reset_exception_type,
    get_exception_type,
    exception_type_context,
    ExceptionTypeFilter,
    RedactFilter,
)

__all__ = [
    "setup_logging",
    "make_dict_config",
    "set_exception_type",
    "reset_exception_type",
    "get_exception_type",
    "exception_type_context",
    "ExceptionTypeFilter",
    "RedactFilter",
]
