import logging
import re
from typing import Self

from pydantic import BaseModel, Field, SerializeAsAny

from phpcodegen.constants import TagNames
from phpcodegen.docblock.tags import ParamTag, Tag


logger = logging.getLogger(__name__)

_TAG_LINE = re.compile(r"^@(?P<name>[\w\\-]*)(?P<content>.*)$", re.DOTALL)


class DocblockParseError(ValueError):
    """Raised when a documentation comment cannot be parsed."""


class Docblock(BaseModel):
    """
    A parsed PHP documentation comment.

    Attributes
    ----------
    short_description : str | None
        The summary: the first paragraph of the comment.
    long_description : str | None
        Any further paragraphs before the first tag.
    tags : list[Tag]
        Tags in the order they appear.
    """

    short_description: str | None = Field(
        default=None, description="First paragraph of the comment."
    )
    long_description: str | None = Field(
        default=None, description="Remaining paragraphs before the tags."
    )
    tags: list[SerializeAsAny[Tag]] = Field(
        default_factory=list, description="Tags in order."
    )

    @classmethod
    def parse(cls, comment: str | None) -> Self:
        """
        Parse comment text into a docblock.

        Parameters
        ----------
        comment : str | None
            A `/** ... */` comment, the bare body of one, or None.

        Returns
        -------
        Docblock
            The parsed docblock. Empty input gives an empty docblock.

        Raises
        ------
        DocblockParseError
            If the comment is not terminated or contains a tag without a name.
        """
        docblock = cls()
        if comment is None or not comment.strip():
            return docblock

        lines = _strip_comment(comment.strip())

        text_lines: list[str] = []
        tag_chunks: list[list[str]] = []
        for line in lines:
            if line.startswith("@"):
                tag_chunks.append([line])
            elif tag_chunks:
                tag_chunks[-1].append(line)
            else:
                text_lines.append(line)

        short, long = _split_descriptions(text_lines)
        docblock.short_description = short
        docblock.long_description = long

        for chunk in tag_chunks:
            docblock.append_tag(_parse_tag("\n".join(chunk).strip()))

        logger.debug(f"Parsed docblock with {len(docblock.tags)} tags")
        return docblock

    def append_tag(self, tag: Tag) -> Self:
        self.tags.append(tag)
        return self

    def get_tags(self, tag_name: str | None = None) -> list[Tag]:
        """
        Return all tags, or only those with the given name.

        Parameters
        ----------
        tag_name : str | None, default=None
            Tag name without `@`. None returns every tag.

        Returns
        -------
        list[Tag]
            Matching tags in document order.
        """
        if tag_name is None:
            return list(self.tags)
        return [tag for tag in self.tags if tag.tag_name == tag_name]

    def has_tag(self, tag_name: str) -> bool:
        return any(tag.tag_name == tag_name for tag in self.tags)

    def is_empty(self) -> bool:
        return not (self.short_description or self.long_description or self.tags)

    def to_string(self) -> str:
        """
        Render the docblock as a `/** ... */` comment.

        Returns
        -------
        str
            The comment text, or an empty string for an empty docblock.
        """
        if self.is_empty():
            return ""

        sections: list[list[str]] = []
        if self.short_description:
            sections.append(self.short_description.splitlines())
        if self.long_description:
            sections.append(self.long_description.splitlines())
        if self.tags:
            sections.append(
                [line for tag in self.tags for line in tag.to_string().splitlines()]
            )

        body: list[str] = []
        for section in sections:
            if body:
                body.append("")
            body.extend(section)

        lines = ["/**"]
        lines.extend(f" * {line}".rstrip() for line in body)
        lines.append(" */")
        return "\n".join(lines)


def _strip_comment(comment: str) -> list[str]:
    if comment.startswith("/*"):
        if not comment.endswith("*/") or len(comment) < 4:
            raise DocblockParseError("Unterminated docblock comment.")
        comment = comment[2:-2].lstrip("*")

    lines: list[str] = []
    for raw in comment.splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line.rstrip())
    return lines


def _split_descriptions(lines: list[str]) -> tuple[str | None, str | None]:
    paragraphs: list[list[str]] = [[]]
    for line in lines:
        if line:
            paragraphs[-1].append(line)
        elif paragraphs[-1]:
            paragraphs.append([])
    paragraphs = [p for p in paragraphs if p]
    if not paragraphs:
        return None, None

    short = "\n".join(paragraphs[0])
    long = "\n\n".join("\n".join(p) for p in paragraphs[1:]) or None
    return short, long


def _parse_tag(text: str) -> Tag:
    match = _TAG_LINE.match(text)
    if match is None or not match.group("name"):
        raise DocblockParseError(f"Tag without a name: '{text}'")

    name = match.group("name")
    content = (match.group("content") or "").strip()
    if name == TagNames.PARAM:
        return ParamTag.from_content(content)
    return Tag(tag_name=name, description=content or None)
