from enum import StrEnum, unique


@unique
class TagNames(StrEnum):
    PARAM = "param"
    RETURN = "return"
    VAR = "var"
    THROWS = "throws"
    SEE = "see"
    DEPRECATED = "deprecated"


@unique
class TypeHints(StrEnum):
    ARRAY = "array"
    CALLABLE = "callable"


@unique
class PhpLiterals(StrEnum):
    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    INF = "INF"
    NEG_INF = "-INF"
    NAN = "NAN"
