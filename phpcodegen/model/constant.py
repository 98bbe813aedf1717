from typing import Any, Self

from phpcodegen.model.parts import NamePart, TypePart, ValuePart

# Marks "no value given"; None is a valid PHP null literal.
_NO_VALUE: Any = object()


class PhpConstant(NamePart, TypePart, ValuePart):
    """
    A named PHP constant.

    Used as a default value, a constant is a reference and is emitted by
    name rather than by value.
    """

    @classmethod
    def create(
        cls,
        name: str | None = None,
        value: Any = _NO_VALUE,
        is_expression: bool = False,
    ) -> Self:
        """
        Create a constant.

        Parameters
        ----------
        name : str | None, default=None
            The constant name.
        value : Any, optional
            The constant value. Stored as a literal unless `is_expression`.
            Omit it to create a constant without a value; None is PHP null.
        is_expression : bool, default=False
            Store `value` as a raw PHP expression.

        Returns
        -------
        PhpConstant
            The new constant.
        """
        constant = cls(name=name)
        if value is _NO_VALUE:
            return constant
        if is_expression:
            constant.set_expression(value)
        else:
            constant.set_value(value)
        return constant
