"""
Lesson content schemas for PostgreSQL Learning.

Defines Pydantic models for lesson pages including:
- Code samples (titled, language-tagged literal code)
- Prose blocks (paragraphs, headings, lists, tables, callouts, columns)
- Sections and page metadata
"""

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, Field, model_validator


# -----------------------------------------------------------------------------
# Content block types
# -----------------------------------------------------------------------------

class ContentBlockBase(BaseModel):
    type: str


class CodeSample(ContentBlockBase):
    """
    A titled code excerpt.

    `code` is literal text: it is stored and displayed exactly as authored,
    including `${...}` markers that belong to the example itself.
    `language` is only a highlighting hint.
    """
    type: Literal["code"] = "code"
    title: str = ""
    language: str = ""
    code: str


class Paragraph(ContentBlockBase):
    type: Literal["paragraph"] = "paragraph"
    text: str              # inline HTML (<strong>, <code>, ...)


class Heading(ContentBlockBase):
    type: Literal["heading"] = "heading"
    level: int = Field(3, ge=3, le=4)  # h2 is reserved for section titles
    text: str


class BulletList(ContentBlockBase):
    type: Literal["list"] = "list"
    ordered: bool = False
    items: list[str] = Field(..., min_length=1)


class Table(ContentBlockBase):
    type: Literal["table"] = "table"
    headers: list[str] = []
    rows: list[list[str]]


CalloutTone = Literal["neutral", "info", "warning", "danger", "success", "caution"]


class Callout(ContentBlockBase):
    """A tinted box grouping other blocks (tips, warnings, summaries)."""
    type: Literal["callout"] = "callout"
    tone: CalloutTone = "neutral"
    blocks: list["ContentBlock"] = []


class Columns(ContentBlockBase):
    """Blocks laid out side by side (two columns on wide screens)."""
    type: Literal["columns"] = "columns"
    blocks: list["ContentBlock"] = []


ContentBlock = Annotated[
    Union[
        Paragraph,
        Heading,
        BulletList,
        Table,
        CodeSample,
        Callout,
        Columns,
    ],
    Field(discriminator="type"),
]

Callout.model_rebuild()
Columns.model_rebuild()


def iter_code_samples(blocks: list[ContentBlock]) -> Iterator[CodeSample]:
    """Walk blocks depth-first and yield code samples in document order."""
    for block in blocks:
        if isinstance(block, CodeSample):
            yield block
        elif isinstance(block, (Callout, Columns)):
            yield from iter_code_samples(block.blocks)


# -----------------------------------------------------------------------------
# Sections and metadata
# -----------------------------------------------------------------------------

class Section(BaseModel):
    title: str
    blocks: list[ContentBlock] = []


class LessonMetadata(BaseModel):
    """Page metadata exported to the host (browser title, meta description)."""
    title: str = Field(..., min_length=1)
    description: str = ""


# -----------------------------------------------------------------------------
# Main lesson content schema
# -----------------------------------------------------------------------------

class LessonContent(BaseModel):
    path: str = Field(..., pattern=r'^/\S*$')
    metadata: LessonMetadata
    heading: str
    intro: list[ContentBlock] = []
    sections: list[Section] = []

    @model_validator(mode='after')
    def has_content(self):
        if not self.intro and not self.sections:
            raise ValueError('Lesson must have intro blocks or at least one section')
        return self

    def iter_code_samples(self) -> Iterator[CodeSample]:
        """All code samples on the page, in document order."""
        yield from iter_code_samples(self.intro)
        for section in self.sections:
            yield from iter_code_samples(section.blocks)
