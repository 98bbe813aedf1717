import logging
from typing import TextIO

from phpcodegen import constants
from phpcodegen.docblock import Docblock, DocblockParseError, ParamTag, Tag
from phpcodegen.model import (
    NamePart,
    ParameterSignature,
    PhpConstant,
    PhpParameter,
    TypePart,
    ValuePart,
)
from phpcodegen.utils import export_value, is_primitive

logging.getLogger(__name__).addHandler(logging.NullHandler())


def add_stderr_logger(level: int = logging.INFO) -> logging.StreamHandler[TextIO]:
    logger = logging.getLogger(__name__)
    handler: logging.StreamHandler[TextIO] = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler


__all__ = [
    "add_stderr_logger",
    "constants",
    "Docblock",
    "DocblockParseError",
    "export_value",
    "is_primitive",
    "NamePart",
    "ParameterSignature",
    "ParamTag",
    "PhpConstant",
    "PhpParameter",
    "Tag",
    "TypePart",
    "ValuePart",
]
