"""Unit tests for the image link grammars."""

import pytest

from sir.api.link.get_first_image_link_in_line import get_first_image_link_in_line
from sir.api.link.get_image_link_at_cursor import get_image_link_at_cursor
from sir.api.link.parse_bare_embed_links import parse_bare_embed_links
from sir.api.link.parse_embed_links import parse_embed_links
from sir.api.link.parse_image_links import parse_image_links
from sir.api.link.parse_inline_links import parse_inline_links
from sir.api.link.SyntaxKind import SyntaxKind

pytestmark = pytest.mark.link


class TestParseEmbedLinks:
    def test_caption_and_size(self):
        links = parse_embed_links("![[image.png|My caption|500]]")
        assert len(links) == 1
        link = links[0]
        assert link.file_path == "image.png"
        assert link.caption == "My caption"
        assert link.size == "500"
        assert link.kind is SyntaxKind.EMBED

    def test_size_without_caption(self):
        (link,) = parse_embed_links("![[image.png||200]]")
        assert link.caption is None
        assert link.size == "200"

    def test_plain_embed(self):
        (link,) = parse_embed_links("![[assets/photo.jpeg]]")
        assert link.file_path == "assets/photo.jpeg"
        assert link.caption is None
        assert link.size is None

    def test_extension_case_insensitive(self):
        (link,) = parse_embed_links("![[Photo.JPG]]")
        assert link.file_path == "Photo.JPG"

    def test_non_image_embeds_ignored(self):
        assert parse_embed_links("![[Other note]] ![[doc.pdf]] [[image.png]]") == []

    def test_escaped_pipe_in_caption(self):
        (link,) = parse_embed_links(r"![[a.png|left \| right|300]]")
        assert link.caption == "left | right"
        assert link.size == "300"

    def test_lone_bracket_in_caption(self):
        (link,) = parse_embed_links("![[a.png|cap]x]]")
        assert link.caption == "cap]x"
        assert link.full_match == "![[a.png|cap]x]]"

    def test_lone_bracket_before_size(self):
        (link,) = parse_embed_links("![[a.png|x]|200]] after")
        assert link.caption == "x]"
        assert link.size == "200"

    def test_escaped_backslash_ends_caption(self):
        first, second = parse_embed_links(r"![[a.png|C:\\]] ![[b.png]]")
        assert first.caption == "C:\\"
        assert second.file_path == "b.png"

    def test_caption_with_spaces_and_punctuation(self):
        (link,) = parse_embed_links("![[a.png|Sunset (2024), beach!]]")
        assert link.caption == "Sunset (2024), beach!"


class TestParseInlineLinks:
    def test_alt_and_title(self):
        (link,) = parse_inline_links('![Alt text](assets/My%20Image.png "Title")')
        assert link.file_path == "assets/My%20Image.png"
        assert link.caption == "Alt text"
        assert link.size is None
        assert link.kind is SyntaxKind.INLINE

    def test_empty_alt(self):
        (link,) = parse_inline_links("![](photo.png)")
        assert link.caption is None

    def test_plain_link_is_not_an_image(self):
        assert parse_inline_links("[text](photo.png)") == []


def test_bare_embeds_match_without_extension():
    links = parse_bare_embed_links("![[Holiday 2]] and ![[Holiday 3|Beach]]")
    assert [link.file_path for link in links] == ["Holiday 2", "Holiday 3"]
    assert links[1].caption == "Beach"


class TestParseImageLinks:
    def test_ordered_by_offset(self):
        text = "See ![[a.png]] then ![x](b.png)"
        links = parse_image_links(text)
        assert [link.file_path for link in links] == ["a.png", "b.png"]
        assert links[0].start == 4
        assert links[0].end == 14
        assert links[1].start == 20

    def test_spans_match_text(self):
        text = "Intro\n![alt](one.png) middle ![[two.gif|cap|100]]\n![[three.webp]]"
        links = parse_image_links(text)
        assert len(links) == 3
        for link in links:
            assert text[link.start : link.end] == link.full_match

    def test_no_links(self):
        assert parse_image_links("Just text with [[a wiki link]].") == []


class TestCursorHelpers:
    LINE = "a ![[x.png]] b"

    def test_inside_link(self):
        link = get_image_link_at_cursor(self.LINE, 5)
        assert link is not None
        assert link.file_path == "x.png"

    def test_boundaries_are_inclusive(self):
        assert get_image_link_at_cursor(self.LINE, 2) is not None
        assert get_image_link_at_cursor(self.LINE, 12) is not None

    def test_outside_link(self):
        assert get_image_link_at_cursor(self.LINE, 0) is None
        assert get_image_link_at_cursor(self.LINE, 13) is None

    def test_first_link_in_line(self):
        link = get_first_image_link_in_line("text ![i](b.png) ![[a.png]]")
        assert link is not None
        assert link.file_path == "b.png"
        assert get_first_image_link_in_line("no images here") is None


def test_to_dict():
    (link,) = parse_image_links("![[a.png|cap]]")
    assert link.to_dict() == {
        "full_match": "![[a.png|cap]]",
        "file_path": "a.png",
        "caption": "cap",
        "size": None,
        "kind": "embed",
        "start": 0,
        "end": 14,
    }
