"""Builds the full DOM/CSS/JS/text inventory of a parsed page."""

import json
import re

from bs4 import BeautifulSoup, Tag

from cricmirror.core.extraction.locator import EmbeddedData
from cricmirror.models.snapshot import (
    CssInventory,
    ElementDescriptor,
    ExternalScript,
    ExternalStylesheet,
    FullSnapshot,
    ImageRef,
    InlineScript,
    InlineStyle,
    JsInventory,
    LinkRef,
    StyleTag,
    TextNode,
)
from cricmirror.utils.urls import absolutize

ELEMENT_TEXT_LIMIT = 200
ELEMENT_HTML_LIMIT = 500
SCRIPT_PREVIEW_LIMIT = 1000
MIN_TEXT_NODE_LENGTH = 10

# Declarations and function statements only
VARIABLE_PATTERN = re.compile(r'(?:var|let|const)\s+(\w+)\s*=')
FUNCTION_PATTERN = re.compile(r'function\s+(\w+)\s*\(')


def attr_text(tag: Tag, name: str) -> str | None:
    """Read an attribute as a string, joining multi-valued ones like class."""
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return ' '.join(value)
    return value


def script_text(tag: Tag) -> str:
    """Return the raw text inside a <script> or <style> tag."""
    return str(tag.string) if tag.string else ''


class InventoryBuilder:
    """Walks a parsed document and collects everything a re-render needs.

    Attributes:
        base_url: Origin relative href/src values are rewritten against

    """

    def __init__(self, base_url: str):
        """Initialize the builder.

        Args:
            base_url: Origin relative href/src values are rewritten against

        """
        self.base_url = base_url

    def build(self, soup: BeautifulSoup, html: str, embedded: EmbeddedData) -> FullSnapshot:
        """Produce the full snapshot of a page.

        Args:
            soup: Parsed document
            html: The raw markup the document was parsed from
            embedded: Live data already located in the page's scripts

        Returns:
            FullSnapshot with every inventory populated

        """
        tags = soup.find_all(True)

        elements, text_content, data_attributes = self._walk_elements(tags)
        scripts = [tag for tag in tags if tag.name == 'script']

        return FullSnapshot(
            raw_html=html,
            html_length=len(html),
            elements=elements,
            css=self._css_inventory(tags),
            javascript=self._js_inventory(scripts),
            images=self._images(tags),
            links=self._links(tags),
            data_attributes=data_attributes,
            meta=self._meta(tags),
            structured_data=self._structured_data(scripts),
            text_content=text_content,
            news_cards=embedded.news_cards,
            matches_list=embedded.matches_list,
        )

    def _walk_elements(
        self, tags: list[Tag]
    ) -> tuple[list[ElementDescriptor], list[TextNode], dict[str, list[str]]]:
        elements = []
        text_content = []
        data_attributes: dict[str, list[str]] = {}

        for tag in tags:
            tag_id = attr_text(tag, 'id') or ''
            class_name = attr_text(tag, 'class') or ''
            text = tag.get_text().strip()
            attributes = {name: attr_text(tag, name) or '' for name in tag.attrs}

            elements.append(
                ElementDescriptor(
                    tag=tag.name.lower(),
                    id=tag_id,
                    class_name=class_name,
                    attributes=attributes,
                    text=text[:ELEMENT_TEXT_LIMIT],
                    html=str(tag)[:ELEMENT_HTML_LIMIT],
                )
            )

            if len(text) > MIN_TEXT_NODE_LENGTH:
                text_content.append(TextNode(tag=tag.name.lower(), id=tag_id, class_name=class_name, text=text))

            for name, value in attributes.items():
                if name.startswith('data-'):
                    values = data_attributes.setdefault(name, [])
                    if value not in values:
                        values.append(value)

        return elements, text_content, data_attributes

    def _css_inventory(self, tags: list[Tag]) -> CssInventory:
        # dicts double as ordered sets
        all_classes: dict[str, None] = {}
        all_ids: dict[str, None] = {}
        inline = []
        style_tags = []
        external = []

        for tag in tags:
            for cls in tag.get('class') or []:
                all_classes.setdefault(cls, None)
            tag_id = attr_text(tag, 'id')
            if tag_id:
                all_ids.setdefault(tag_id, None)

            style = attr_text(tag, 'style')
            if style is not None:
                inline.append(
                    InlineStyle(
                        tag=tag.name.lower(),
                        id=tag_id,
                        class_name=attr_text(tag, 'class'),
                        style=style,
                    )
                )

            if tag.name == 'style':
                style_tags.append(
                    StyleTag(
                        index=len(style_tags),
                        type=attr_text(tag, 'type'),
                        media=attr_text(tag, 'media'),
                        css=script_text(tag),
                    )
                )
            elif tag.name == 'link' and 'stylesheet' in (tag.get('rel') or []):
                href = attr_text(tag, 'href')
                if href:
                    external.append(
                        ExternalStylesheet(href=absolutize(href, self.base_url), media=attr_text(tag, 'media'))
                    )

        return CssInventory(
            inline=inline,
            style_tags=style_tags,
            external=external,
            all_classes=list(all_classes),
            all_ids=list(all_ids),
        )

    def _js_inventory(self, scripts: list[Tag]) -> JsInventory:
        inline = []
        external = []
        variables = {}
        functions = []

        for index, tag in enumerate(scripts):
            content = script_text(tag)
            src = attr_text(tag, 'src')
            script_type = attr_text(tag, 'type')

            if content:
                inline.append(
                    InlineScript(
                        index=index,
                        type=script_type,
                        content=content[:SCRIPT_PREVIEW_LIMIT],
                        length=len(content),
                    )
                )
                for name in VARIABLE_PATTERN.findall(content):
                    variables[name] = True
                functions.extend(FUNCTION_PATTERN.findall(content))

            if src:
                external.append(ExternalScript(src=absolutize(src, self.base_url), type=script_type))

        return JsInventory(inline=inline, external=external, variables=variables, functions=functions)

    def _images(self, tags: list[Tag]) -> list[ImageRef]:
        images = []
        for tag in tags:
            if tag.name != 'img':
                continue
            src = attr_text(tag, 'src') or attr_text(tag, 'data-src')
            if src:
                images.append(
                    ImageRef(
                        src=absolutize(src, self.base_url),
                        alt=attr_text(tag, 'alt'),
                        title=attr_text(tag, 'title'),
                        class_name=attr_text(tag, 'class'),
                        id=attr_text(tag, 'id'),
                    )
                )
        return images

    def _links(self, tags: list[Tag]) -> list[LinkRef]:
        links = []
        for tag in tags:
            if tag.name != 'a':
                continue
            href = attr_text(tag, 'href')
            if href:
                links.append(
                    LinkRef(
                        href=absolutize(href, self.base_url),
                        text=tag.get_text().strip(),
                        class_name=attr_text(tag, 'class'),
                    )
                )
        return links

    def _meta(self, tags: list[Tag]) -> dict[str, str]:
        meta = {}
        for tag in tags:
            if tag.name != 'meta':
                continue
            name = attr_text(tag, 'name') or attr_text(tag, 'property')
            content = attr_text(tag, 'content')
            if name and content:
                meta[name] = content
        return meta

    def _structured_data(self, scripts: list[Tag]) -> list:
        structured_data = []
        for tag in scripts:
            if attr_text(tag, 'type') != 'application/ld+json':
                continue
            try:
                structured_data.append(json.loads(script_text(tag)))
            except ValueError:
                continue
        return structured_data
