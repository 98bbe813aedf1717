from .docblock import Docblock, DocblockParseError
from .tags import ParamTag, Tag

__all__ = ["Docblock", "DocblockParseError", "ParamTag", "Tag"]
