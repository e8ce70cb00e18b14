# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from absl import logging
from lxml import etree  # pytype: disable=import-error
import re
from typing import Iterable, Optional, Union
from svgclean.errors import MalformedDocument
from svgclean.rules import EDITOR_METADATA_RULES, RemovalRule
from svgclean.svg_meta import RULE_NAMESPACES, prefixed_name, svgns, xml_space_attr


_INDENT = "\t"

# Whitespace between these changes how text renders
_TEXT_CONTENT_TAGS = frozenset(
    f"{{{svgns()}}}{tag}" for tag in ("text", "tspan", "textPath")
)

_STANDALONE_DECL = re.compile(
    rb"^(?:\xef\xbb\xbf)?\s*<\?xml\s[^>]*?"
    rb"\bstandalone\s*=\s*[\x27\x22](yes|no)[\x27\x22]"
)


def _has_text(el) -> bool:
    if el.text and el.text.strip():
        return True
    return any(child.tail and child.tail.strip() for child in el)


def _indent(el, level=0):
    """One tab per depth.

    Text content elements, xml:space="preserve" and mixed content keep their
    whitespace exactly as parsed, subtree included.
    """
    if (
        not len(el)
        or el.tag in _TEXT_CONTENT_TAGS
        or el.get(xml_space_attr()) == "preserve"
        or _has_text(el)
    ):
        return
    child_indent = "\n" + _INDENT * (level + 1)
    el.text = child_indent
    for child in el:
        # comments and processing instructions have no children to indent
        if isinstance(child.tag, str):
            _indent(child, level + 1)
        child.tail = child_indent
    el[-1].tail = "\n" + _INDENT * level


def _attribute_results(el, xpath: str) -> list:
    results = el.xpath(xpath, namespaces=dict(RULE_NAMESPACES))
    if not isinstance(results, list) or any(
        not getattr(r, "is_attribute", False) for r in results
    ):
        raise ValueError(f"{xpath} must select attributes only")
    return results


class SVG:

    tree: etree._ElementTree
    # standalone="yes|no" of the source declaration; None if it had none
    standalone: Optional[bool]

    def __init__(self, tree, standalone=None):
        if not isinstance(tree, etree._ElementTree):
            tree = tree.getroottree()
        self.tree = tree
        self.standalone = standalone

    @property
    def svg_root(self) -> etree._Element:
        return self.tree.getroot()

    def _copy(self) -> "SVG":
        # copy.deepcopy of the root would lose prolog comments and the DOCTYPE
        return SVG.fromstring(self._serialize())

    def xpath(self, xpath: str, el: etree._Element = None):
        if el is None:
            el = self.svg_root
        return el.xpath(xpath, namespaces=dict(RULE_NAMESPACES))

    def remove_xpath(self, xpath: str, inplace=False):
        """Delete every attribute node the xpath selects.

        Owning elements are kept even if left without attributes; the order
        of the remaining attributes is unchanged.
        """
        if not inplace:
            svg = self._copy()
            svg.remove_xpath(xpath, inplace=True)
            return svg

        removed = 0
        for result in _attribute_results(self.svg_root, xpath):
            el = result.getparent()
            if result.attrname in el.attrib:
                del el.attrib[result.attrname]
                removed += 1
                logging.vlog(
                    1, "Removed %s=%r", prefixed_name(result.attrname), str(result)
                )
        if not removed:
            logging.vlog(2, "Nothing matches %s", xpath)

        return self

    def strip_metadata(
        self, rules: Iterable[RemovalRule] = EDITOR_METADATA_RULES, inplace=False
    ):
        if not inplace:
            svg = self._copy()
            svg.strip_metadata(rules, inplace=True)
            return svg

        for rule in rules:
            self.remove_xpath(rule.xpath, inplace=True)

        return self

    def _serialize(self) -> bytes:
        return etree.tostring(
            self.tree,
            encoding="UTF-8",
            xml_declaration=True,
            standalone=self.standalone,
        )

    def tostring(self) -> bytes:
        """Canonical, tab indented UTF-8 with a single trailing newline.

        Rewrites whitespace-only text in the tree to the canonical indentation.
        """
        _indent(self.svg_root)
        return self._serialize().rstrip(b"\n") + b"\n"

    @classmethod
    def fromstring(cls, string: Union[bytes, str]):
        if isinstance(string, str):
            string = string.encode("utf-8")
        if not string.strip():
            raise MalformedDocument("Document is empty")

        parser = etree.XMLParser(remove_blank_text=True)
        try:
            root = etree.fromstring(string, parser)
        except etree.XMLSyntaxError as e:
            raise MalformedDocument(str(e)) from e
        # lxml reports standalone=False for a declaration without one,
        # so read it from the source
        match = _STANDALONE_DECL.match(string)
        standalone = None if match is None else match.group(1) == b"yes"
        return cls(root.getroottree(), standalone=standalone)

    @classmethod
    def parse(cls, file_or_path):
        if hasattr(file_or_path, "read"):
            raw_svg = file_or_path.read()
        else:
            with open(file_or_path, "rb") as f:
                raw_svg = f.read()
        return cls.fromstring(raw_svg)


def strip(
    data: Union[bytes, str], rules: Iterable[RemovalRule] = EDITOR_METADATA_RULES
) -> bytes:
    """Remove editor metadata from an SVG document and pretty print it.

    Raises:
        MalformedDocument if data is not well-formed XML.
    """
    return SVG.fromstring(data).strip_metadata(rules, inplace=True).tostring()
