"""Pydantic models for extracted page snapshots.

Field names are snake_case in Python and camelCase on the wire, so a
dumped snapshot keeps the shape the rendering layer reads.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Base for every snapshot part: immutable, camelCase aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    def to_dict(self) -> dict[str, Any]:
        """Dump to JSON-compatible data using the wire names.

        Returns:
            Dictionary ready for json.dump

        """
        return self.model_dump(mode='json', by_alias=True)


class ElementDescriptor(SnapshotModel):
    """One element of the document, in document order.

    Attributes:
        tag: Lowercased tag name
        id: The id attribute or empty string
        class_name: The raw class attribute or empty string
        attributes: Every attribute of the element
        text: Trimmed text content, at most 200 characters
        html: Outer markup, at most 500 characters

    """

    tag: str
    id: str = ''
    class_name: str = ''
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str = ''
    html: str = ''


class TextNode(SnapshotModel):
    """Element whose trimmed text is long enough to be worth keeping."""

    tag: str
    id: str = ''
    class_name: str = ''
    text: str


class InlineStyle(SnapshotModel):
    """Element carrying a style attribute."""

    tag: str
    id: str | None = None
    class_name: str | None = None
    style: str


class StyleTag(SnapshotModel):
    """A <style> block."""

    index: int
    type: str | None = None
    media: str | None = None
    css: str = ''


class ExternalStylesheet(SnapshotModel):
    """A <link rel="stylesheet">; href is always absolute."""

    href: str
    media: str | None = None


class CssInventory(SnapshotModel):
    """Everything style related on the page.

    Attributes:
        inline: Elements with a style attribute
        style_tags: Contents of <style> blocks
        external: Linked stylesheets
        all_classes: Distinct class names, first-seen order
        all_ids: Distinct ids, first-seen order

    """

    inline: list[InlineStyle] = Field(default_factory=list)
    style_tags: list[StyleTag] = Field(default_factory=list)
    external: list[ExternalStylesheet] = Field(default_factory=list)
    all_classes: list[str] = Field(default_factory=list)
    all_ids: list[str] = Field(default_factory=list)


class InlineScript(SnapshotModel):
    """An inline <script>; content is a preview of at most 1000 characters."""

    index: int
    type: str | None = None
    content: str
    length: int


class ExternalScript(SnapshotModel):
    """A <script src>; src is always absolute."""

    src: str
    type: str | None = None


class JsInventory(SnapshotModel):
    """Scripts on the page plus heuristically detected names.

    The variable and function names come from pattern matching, not a
    JavaScript parser, so they are approximate.

    Attributes:
        inline: Inline script previews
        external: External script references
        variables: Presence map of detected variable names
        functions: Detected function names, duplicates kept

    """

    inline: list[InlineScript] = Field(default_factory=list)
    external: list[ExternalScript] = Field(default_factory=list)
    variables: dict[str, Literal[True]] = Field(default_factory=dict)
    functions: list[str] = Field(default_factory=list)


class ImageRef(SnapshotModel):
    """An <img>; src is always absolute."""

    src: str
    alt: str | None = None
    title: str | None = None
    class_name: str | None = None
    id: str | None = None


class LinkRef(SnapshotModel):
    """An <a href>; href is always absolute."""

    href: str
    text: str = ''
    class_name: str | None = None


class FastSnapshot(SnapshotModel):
    """Live data only: news cards and matches found in inline scripts."""

    news_cards: list[JsonValue] = Field(default_factory=list)
    matches_list: list[JsonValue] = Field(default_factory=list)
    html_length: int
    fast_mode: Literal[True] = True


class FullSnapshot(SnapshotModel):
    """Complete inventory of a page plus its raw markup."""

    raw_html: str
    html_length: int
    elements: list[ElementDescriptor] = Field(default_factory=list)
    css: CssInventory = Field(default_factory=CssInventory)
    javascript: JsInventory = Field(default_factory=JsInventory)
    images: list[ImageRef] = Field(default_factory=list)
    links: list[LinkRef] = Field(default_factory=list)
    data_attributes: dict[str, list[str]] = Field(default_factory=dict)
    meta: dict[str, str] = Field(default_factory=dict)
    structured_data: list[JsonValue] = Field(default_factory=list)
    text_content: list[TextNode] = Field(default_factory=list)
    news_cards: list[JsonValue] = Field(default_factory=list)
    matches_list: list[JsonValue] = Field(default_factory=list)


Snapshot = FastSnapshot | FullSnapshot
