from typing import Any

from pydantic import BaseModel, Field


class ParameterSignature(BaseModel):
    """
    Describes one parameter as declared in a PHP function signature.

    Callers build this from whatever source they inspect (a parsed AST, a
    stub file) and hand it to `PhpParameter.from_reflection`.

    Attributes
    ----------
    name : str
        Parameter name without the leading `$`.
    is_passed_by_reference : bool
        Whether the parameter is declared with `&`.
    has_default_value : bool
        Whether a default value is declared. Decides if `default_value` is used.
    default_value : Any
        The declared default value.
    is_array : bool
        Whether the parameter carries an `array` type hint.
    class_name : str | None
        Class or interface type hint, if any.
    is_callable : bool
        Whether the parameter carries a `callable` type hint.
    """

    name: str = Field(..., min_length=1, description="Parameter name without `$`.")
    is_passed_by_reference: bool = Field(
        default=False, description="Whether the parameter is passed by reference."
    )
    has_default_value: bool = Field(
        default=False, description="Whether a default value is declared."
    )
    default_value: Any = Field(default=None, description="The declared default value.")
    is_array: bool = Field(default=False, description="Array type hint present.")
    class_name: str | None = Field(
        default=None, description="Class or interface type hint."
    )
    is_callable: bool = Field(default=False, description="Callable type hint present.")
