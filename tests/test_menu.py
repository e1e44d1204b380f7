"""Tests for the menu tree model and links."""

from __future__ import annotations

import pytest

from bootstencil.schemas import Link, MenuNode


class TestLink:
    """Tests for Link model."""

    def test_href_renders_anchor(self) -> None:
        tag = Link(text="Home", href="/", css_class="active", rel="home", target="_self").to_tag()
        assert tag.name == "a"
        assert tag["href"] == "/"
        assert tag["target"] == "_self"
        assert tag.get_text() == "Home"

    def test_without_href_renders_span(self) -> None:
        tag = Link(text="Menu").to_tag()
        assert tag.name == "span"
        assert "href" not in tag.attrs

    def test_icon_is_appended_after_text(self) -> None:
        tag = Link(text="Users", href="/users", icon="users").to_tag()
        icon = tag.find("span")
        assert icon is not None
        assert icon["class"] in ("fa fa-users", ["fa", "fa-users"])
        assert tag.contents[0] == "Users"

    def test_from_tag_reads_icon_and_attributes(self) -> None:
        link = Link(text="Users", href="/users", icon="users", id="u", css_class="x y")
        assert Link.from_tag(link.to_tag()) == link


class TestMenuNode:
    """Tests for MenuNode building."""

    def test_add_creates_leaf_with_parent(self) -> None:
        root = MenuNode()
        assert root.children is None

        item = root.add("Home", "/")

        assert root.children == [item]
        assert item.parent is root
        assert item.children is None
        assert item.is_leaf
        assert item.label == Link(text="Home", href="/")

    def test_add_link(self) -> None:
        root = MenuNode()
        link = Link(text="Docs", href="/docs", icon="book")
        item = root.add(link)
        assert item.label is link

    def test_add_link_rejects_href(self) -> None:
        with pytest.raises(TypeError):
            MenuNode().add(Link(text="x"), "/x")

    def test_empty_children_is_a_submenu(self) -> None:
        """Explicit empty children list is not a leaf."""
        node = MenuNode(label=Link(text="More"), children=[])
        assert not node.is_leaf

    def test_to_dict_omits_children_of_leaves(self) -> None:
        root = MenuNode(label=Link(text="Site"))
        about = root.add("About", "/about")
        about.add("Team")
        assert root.to_dict() == {
            "label": {"text": "Site"},
            "children": [
                {
                    "label": {"text": "About", "href": "/about"},
                    "children": [{"label": {"text": "Team"}}],
                }
            ],
        }

    def test_from_markdown(self, site_outline: str) -> None:
        menu = MenuNode.from_markdown(site_outline)
        assert menu.label.text == "Site"
