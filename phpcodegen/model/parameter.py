import logging
from typing import Any, Self

from pydantic import Field

from phpcodegen.constants import TagNames, TypeHints
from phpcodegen.docblock.docblock import Docblock
from phpcodegen.docblock.tags import ParamTag
from phpcodegen.model.parts import NamePart, TypePart, ValuePart
from phpcodegen.model.signature import ParameterSignature
from phpcodegen.utils.values import export_value, is_primitive


logger = logging.getLogger(__name__)


class PhpParameter(NamePart, TypePart, ValuePart):
    """
    A parameter of a PHP function or method.

    Attributes
    ----------
    name : str | None
        The parameter name, without `$`.
    type : str | None
        The PHP type of the parameter.
    description : str | None
        A human-readable description of the type.
    value : str | int | float | bool | PhpConstant | None
        Literal default value.
    expression : str | None
        Default value given as raw PHP source.
    passed_by_reference : bool
        Whether the parameter is declared with `&`.
    """

    passed_by_reference: bool = Field(
        default=False, description="Whether the parameter is passed by reference."
    )

    def __init__(self, name: str | None = None, **data: Any):
        """
        Initialize the parameter.

        Parameters
        ----------
        name : str | None, default=None
            The parameter name.
        """
        super().__init__(name=name, **data)

    @classmethod
    def create(cls, name: str | None = None) -> Self:
        return cls(name)

    @classmethod
    def from_reflection(
        cls,
        signature: ParameterSignature,
        docblock: Docblock | str | None = None,
    ) -> Self:
        """
        Build a parameter from a signature and the docblock of its function.

        The type comes from the matching `@param` tag when there is one,
        otherwise from the signature's type hints: array, then class, then
        callable.

        Parameters
        ----------
        signature : ParameterSignature
            The declared parameter.
        docblock : Docblock | str | None, default=None
            The docblock of the declaring function, parsed or as comment text.

        Returns
        -------
        PhpParameter
            The populated parameter.

        Raises
        ------
        DocblockParseError
            If `docblock` is comment text that cannot be parsed.
        """
        parameter = cls(signature.name).set_passed_by_reference(
            signature.is_passed_by_reference
        )

        if signature.has_default_value:
            default = signature.default_value
            if is_primitive(default):
                parameter.set_value(default)
            else:
                parameter.set_expression(export_value(default))

        if not isinstance(docblock, Docblock):
            docblock = Docblock.parse(docblock)

        variable = f"${signature.name}"
        tag = next(
            (
                t
                for t in docblock.get_tags(TagNames.PARAM)
                if isinstance(t, ParamTag) and t.variable == variable
            ),
            None,
        )
        if tag is not None:
            parameter.set_type(tag.type, tag.description)

        if parameter.type is None:
            if signature.is_array:
                parameter.set_type(TypeHints.ARRAY.value)
            elif signature.class_name:
                parameter.set_type(signature.class_name)
            elif signature.is_callable:
                parameter.set_type(TypeHints.CALLABLE.value)

        logger.debug(
            (
                f"Reconstructed parameter: name='{parameter.name}', "
                f"type='{parameter.type or 'N/A'}', "
                f"by_reference={parameter.passed_by_reference}"
            )
        )
        return parameter

    def set_passed_by_reference(self, passed_by_reference: Any) -> Self:
        self.passed_by_reference = bool(passed_by_reference)
        return self

    def is_passed_by_reference(self) -> bool:
        return self.passed_by_reference

    def get_docblock_tag(self) -> ParamTag:
        """
        Build a `@param` tag from the current type, name and description.

        Returns
        -------
        ParamTag
            A new tag; later changes to the parameter do not affect it.
        """
        return (
            ParamTag.create()
            .set_type(self.type)
            .set_variable(self.name)
            .set_description(self.get_type_description())
        )

    def set_type_description(self, description: str | None) -> Self:
        """Alias for `set_description`."""
        return self.set_description(description)

    def get_type_description(self) -> str | None:
        """Alias for `get_description`."""
        return self.get_description()
