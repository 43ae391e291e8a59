"""Build a scene graph from an SVG document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from svg_scene import config
from svg_scene.nodes import Group, Node, Transform
from svg_scene.style import cascade_style
from svg_scene.utils import (
    GROUP_TAGS,
    assure_elem,
    get_class,
    in_svg_namespace,
    read_tree,
)
from svg_scene.wrappers import filtered_tag

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path
    from xml.etree import ElementTree as ET

logger = logging.getLogger(__name__)


class SvgParser:
    """Convert an SVG document into groups and shapes.

    Every shape is placed with the same position transform.
    """

    def __init__(
        self,
        data: str | Path,
        pos: Transform | None = None,
        settings: config.Settings | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            data: SVG text or the path of an SVG file.
            pos: The transform stamped onto every shape.
            settings: The parser settings. Defaults to the environment settings.
        """
        self.data = data
        self.position = pos or Transform()
        self.settings = settings or config.settings

    def parse(self) -> Group:
        """Parse the document into a root group.

        The children of the root `<svg>` element become the contents of the
        returned group.

        Raises:
            xml.etree.ElementTree.ParseError: If the document is not XML.
            PathDataError: If strict path parsing is enabled and a path is
                malformed.
        """
        tree = read_tree(self.data)
        if not assure_elem(tree):
            raise ValueError("No root element found")

        nodes = self._iterate_through_tree([tree])
        logger.debug("Parsed %d top level nodes", len(nodes))

        return Group(contents=nodes)

    def _iterate_through_tree(
        self,
        children: Iterable[ET.Element],
        group_style: Mapping[str, str] | None = None,
    ) -> list[Node]:
        nodes: list[Node] = []
        for child in children:
            if in_svg_namespace(child) and filtered_tag(child.tag) == "svg":
                style = cascade_style(group_style or {}, child.attrib)
                nodes.extend(self._iterate_through_tree(child, style))
            elif (node := self._parse_node(child, group_style)) is not None:
                nodes.append(node)

        return nodes

    def _parse_node(
        self, elem: ET.Element, group_style: Mapping[str, str] | None = None
    ) -> Node | None:
        if not in_svg_namespace(elem):
            logger.debug("Skipping foreign element %s", elem.tag)
            return None

        if filtered_tag(elem.tag) in GROUP_TAGS:
            return self._parse_group(elem, group_style)

        return self._parse_shape(elem, group_style)

    def _parse_shape(
        self, elem: ET.Element, group_style: Mapping[str, str] | None = None
    ) -> Node | None:
        cls = get_class(elem)
        if cls is None:
            return None

        return cls(elem, group_style, self.settings).shape(self.position)

    def _parse_group(
        self, elem: ET.Element, group_style: Mapping[str, str] | None = None
    ) -> Group:
        style = cascade_style(group_style or {}, elem.attrib)

        contents: list[Node] = []
        for child in elem:
            if (node := self._parse_node(child, style)) is not None:
                contents.append(node)

        return Group(contents=contents)


def parse_svg(
    data: str | Path,
    pos: Transform | None = None,
    settings: config.Settings | None = None,
) -> Group:
    """Parse an SVG document into a scene graph.

    Example:
        >>> group = parse_svg('<svg><circle r="2" fill="#f00"/></svg>')
        >>> group.contents[0].form
        Circle(cx=0.0, cy=0.0, r=2.0)
    """
    return SvgParser(data, pos=pos, settings=settings).parse()
