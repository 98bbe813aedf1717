import re
from typing import Self, override

from pydantic import BaseModel, Field

from phpcodegen.constants import TagNames


_VARIABLE = re.compile(r"&?(\.\.\.)?&?\$[A-Za-z_\x80-\xff][\w\x80-\xff]*")


class Tag(BaseModel):
    """
    A generic docblock tag such as `@see Foo::bar()`.

    Attributes
    ----------
    tag_name : str
        Tag name without the leading `@`.
    description : str | None
        Everything after the tag name.
    """

    tag_name: str = Field(..., min_length=1, description="Tag name without `@`.")
    description: str | None = Field(default=None, description="Tag content.")

    def set_description(self, description: str | None) -> Self:
        self.description = description
        return self

    def get_description(self) -> str | None:
        return self.description

    def to_string(self) -> str:
        return " ".join(part for part in self._parts() if part)

    def _parts(self) -> list[str | None]:
        return [f"@{self.tag_name}", self.description]

    @override
    def __str__(self) -> str:
        return self.to_string()


class ParamTag(Tag):
    """
    A `@param type $variable description` tag.

    Attributes
    ----------
    type : str | None
        Declared type of the parameter.
    variable : str | None
        Variable name including the leading `$`.
    variadic : bool
        Whether the variable is written as `...$name`.
    """

    tag_name: str = Field(default=TagNames.PARAM.value, description="Tag name.")
    type: str | None = Field(default=None, description="Declared parameter type.")
    variable: str | None = Field(
        default=None, description="Variable name including `$`."
    )
    variadic: bool = Field(default=False, description="Variable is variadic.")

    @classmethod
    def create(cls) -> Self:
        return cls()

    @classmethod
    def from_content(cls, content: str) -> Self:
        """
        Parse the content following `@param`.

        Accepts `[type] [...][&]$variable [description]`. When the first word
        does not look like a variable it is taken as the type.

        Parameters
        ----------
        content : str
            The tag content.

        Returns
        -------
        ParamTag
            The parsed tag.
        """
        tag = cls()
        words = content.strip().split(maxsplit=1)
        if words and not _is_variable(words[0]):
            tag.set_type(words[0])
            words = words[1].split(maxsplit=1) if len(words) > 1 else []
        if words and _is_variable(words[0]):
            variable = words[0].lstrip("&")
            if variable.startswith("..."):
                tag.set_variadic(True)
                variable = variable[3:].lstrip("&")
            tag.set_variable(variable)
            words = words[1:]
        if words:
            lines = (line.strip() for line in " ".join(words).splitlines())
            tag.set_description("\n".join(lines).strip() or None)
        return tag

    def set_type(self, type: str | None) -> Self:
        self.type = type
        return self

    def get_type(self) -> str | None:
        return self.type

    def set_variable(self, variable: str | None) -> Self:
        if variable is not None and not variable.startswith("$"):
            variable = f"${variable}"
        self.variable = variable
        return self

    def get_variable(self) -> str | None:
        return self.variable

    def set_variadic(self, variadic: bool) -> Self:
        self.variadic = bool(variadic)
        return self

    def is_variadic(self) -> bool:
        return self.variadic

    @override
    def _parts(self) -> list[str | None]:
        variable = self.variable
        if variable is not None and self.variadic:
            variable = f"...{variable}"
        return [f"@{self.tag_name}", self.type, variable, self.description]


def _is_variable(word: str) -> bool:
    return _VARIABLE.fullmatch(word) is not None
