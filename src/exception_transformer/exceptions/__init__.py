# exception_transformer/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   └── base.py                    # Library-level errors (InvalidArgumentError, UnexpectedShapeError)

from .base import ExceptionTransformerError, InvalidArgumentError, UnexpectedShapeError

__all__ = [
    "ExceptionTransformerError",
    "InvalidArgumentError",
    "UnexpectedShapeError",
]
