from typing import Any, Self, override

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from phpcodegen.utils.values import export_value, is_primitive


class NamePart(BaseModel):
    """
    Named capability: holds the identifier of a model element.

    Attributes
    ----------
    name : str | None
        The identifier, without any sigil. May stay None until set.
    """

    name: str | None = Field(default=None, description="Identifier of the element.")

    def set_name(self, name: str | None) -> Self:
        self.name = name
        return self

    def get_name(self) -> str | None:
        return self.name


class TypePart(BaseModel):
    """
    Typed capability: holds a PHP type name and a description of it.

    Attributes
    ----------
    type : str | None
        PHP type name (e.g., "int", "array", "\\Foo\\Bar").
    description : str | None
        A human-readable description of the type.
    """

    type: str | None = Field(default=None, description="PHP type name.")
    description: str | None = Field(
        default=None, description="Human-readable description of the type."
    )

    def set_type(self, type: str | None, description: str | None = None) -> Self:
        """
        Set the type and, when given, its description.

        Parameters
        ----------
        type : str | None
            The PHP type name.
        description : str | None, default=None
            The type description. None keeps the current description.

        Returns
        -------
        Self
            Self for method chaining.
        """
        self.type = type
        if description is not None:
            self.description = description
        return self

    def get_type(self) -> str | None:
        return self.type

    def set_description(self, description: str | None) -> Self:
        self.description = description
        return self

    def get_description(self) -> str | None:
        return self.description


class ValuePart(BaseModel):
    """
    Valued capability: a literal value or a raw PHP expression, never both.

    Attributes
    ----------
    value : str | int | float | bool | PhpConstant | None
        Literal value. None is a valid literal (PHP null), so whether a value
        is set at all is tracked separately, see `has_value`.
    expression : str | None
        PHP source used verbatim instead of a literal.
    """

    value: Any = Field(default=None, description="Literal value.")
    expression: str | None = Field(
        default=None, description="PHP source used verbatim instead of a literal."
    )

    _has_value: bool = PrivateAttr(default=False)

    @field_validator("value")
    @classmethod
    def validate_value_is_primitive(cls, v: Any) -> Any:
        if not is_primitive(v):
            raise ValueError(
                f"Value {v!r} is not a literal. Use an expression instead."
            )
        return v

    @model_validator(mode="after")
    def validate_value_or_expression(self) -> Self:
        """
        Validates that a value and an expression are not both given.
        """
        if "value" in self.model_fields_set and self.expression is not None:
            raise ValueError(
                f"Cannot set both value {self.value!r} and "
                f"expression '{self.expression}'."
            )
        return self

    @override
    def model_post_init(self, context: Any) -> None:
        self._has_value = "value" in self.model_fields_set

    def set_value(self, value: Any) -> Self:
        """
        Set a literal value and clear any expression.

        Parameters
        ----------
        value : str | int | float | bool | PhpConstant | None
            The literal value.

        Returns
        -------
        Self
            Self for method chaining.

        Raises
        ------
        ValueError
            If the value is not a literal.
        """
        if not is_primitive(value):
            raise ValueError(
                f"Value {value!r} is not a literal. Use set_expression() instead."
            )
        self.expression = None
        self.value = value
        self._has_value = True
        return self

    def unset_value(self) -> Self:
        self.value = None
        self._has_value = False
        return self

    def get_value(self) -> Any:
        return self.value

    def has_value(self) -> bool:
        return self._has_value

    def set_expression(self, expression: Any) -> Self:
        """
        Set a raw PHP expression and clear any literal value.

        Parameters
        ----------
        expression : Any
            PHP source, emitted verbatim. Anything other than a string is
            rendered as PHP literal text first.

        Returns
        -------
        Self
            Self for method chaining.
        """
        if not isinstance(expression, str):
            expression = export_value(expression)
        self.unset_value()
        self.expression = expression
        return self

    def unset_expression(self) -> Self:
        self.expression = None
        return self

    def get_expression(self) -> str | None:
        return self.expression

    def has_expression(self) -> bool:
        return self.expression is not None
