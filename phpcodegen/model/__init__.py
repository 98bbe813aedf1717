from .constant import PhpConstant
from .parameter import PhpParameter
from .parts import NamePart, TypePart, ValuePart
from .signature import ParameterSignature

__all__ = [
    "NamePart",
    "ParameterSignature",
    "PhpConstant",
    "PhpParameter",
    "TypePart",
    "ValuePart",
]
