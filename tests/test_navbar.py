"""Tests for the navbar renderer."""

from __future__ import annotations

import pytest

from bootstencil.exceptions import MutualExclusionError
from bootstencil.html_utils import get_classes
from bootstencil.navbar import Navbar
from bootstencil.outline import parse_outline
from bootstencil.schemas import Link, MenuNode


class TestNavbarRender:
    """Tests for Navbar.render."""

    def test_renders_outline_menu(self, site_outline: str, uids) -> None:
        navbar = Navbar(menu=parse_outline(site_outline), css_class="navbar-dark bg-dark", uids=uids)

        root = navbar.render()

        assert root.name == "nav"
        assert get_classes(root) == ["navbar", "navbar-expand-lg", "navbar-dark", "bg-dark"]
        brand = root.find("a", class_="navbar-brand")
        assert brand.get_text(strip=True) == "Site"

        toggler = root.find("button", class_="navbar-toggler")
        content = root.find("div", class_="navbar-collapse")
        assert toggler["data-target"] == "#bs4navbar-100"
        assert content["id"] == "bs4navbar-100"

        containers = content.find_all("ul", class_="navbar-nav")
        assert len(containers) == 1
        items = containers[0].find_all("li", recursive=False)
        assert len(items) == 2

        home_link = items[0].find("a")
        assert home_link["href"] == "/"
        assert home_link.get_text(strip=True) == "Home"
        assert get_classes(home_link) == ["nav-link"]

        dropdown = items[1]
        assert "dropdown" in get_classes(dropdown)
        toggle = dropdown.find("a", class_="dropdown-toggle")
        menu = dropdown.find("div", class_="dropdown-menu")
        assert toggle.get_text(strip=True) == "About"
        assert toggle["id"] == "bs4navbar-101"
        assert menu["aria-labelledby"] == "bs4navbar-101"
        links = menu.find_all("a", class_="dropdown-item")
        assert [link["href"] for link in links] == ["/about/team", "/about/contact"]
        assert [link.get_text(strip=True) for link in links] == ["Team", "Contact"]

    def test_markers_are_stripped(self, site_outline: str, uids) -> None:
        root = Navbar(menu=parse_outline(site_outline), uids=uids).render()
        assert root.find_all(attrs={"data-stencil": True}) == []
        assert "data-stencil" not in root.attrs

    def test_positioning_container(self, uids) -> None:
        """The inner .container wrapper is kept only on request."""
        menu = MenuNode(label=Link(text="Brand", href="/"))
        menu.add("Home", "/")
        without = Navbar(menu=menu, uids=uids).render()
        assert without.find("div", class_="container") is None
        assert without.find("a", class_="navbar-brand").parent is without

        kept = Navbar(menu=parse_outline("# Brand\n- Home"), in_container=True, uids=uids).render()
        assert kept.find("div", class_="container") is not None

    def test_brand_removed_without_label(self, uids) -> None:
        menu = MenuNode()
        menu.add("Home", "/")
        root = Navbar(menu=menu, uids=uids).render()
        assert root.find("a", class_="navbar-brand") is None

    def test_render_is_idempotent(self, site_outline: str, uids) -> None:
        """Second call returns the same root and consumes no identifier."""
        navbar = Navbar(menu=parse_outline(site_outline), uids=uids)
        first = navbar.render()
        consumed = uids.peek()
        html = str(first)

        second = navbar.render()

        assert second is first
        assert str(second) == html
        assert uids.peek() == consumed
        assert navbar.rendered

    def test_ids_are_unique_across_renders(self, site_outline: str, uids) -> None:
        ids: list[str] = []
        for _ in range(3):
            root = Navbar(menu=parse_outline(site_outline), uids=uids).render()
            ids.extend(tag["id"] for tag in root.find_all(id=True))
        assert len(ids) == 6
        assert len(set(ids)) == len(ids)

    def test_default_allocator_is_shared_by_instances(self, site_outline: str) -> None:
        first = Navbar(menu=parse_outline(site_outline)).render()
        second = Navbar(menu=parse_outline(site_outline)).render()
        first_id = first.find("div", class_="navbar-collapse")["id"]
        second_id = second.find("div", class_="navbar-collapse")["id"]
        assert first_id != second_id
        assert first_id.startswith("bs4navbar-")

    def test_menu_and_parts_are_mutually_exclusive(self, uids) -> None:
        """Fails before touching the working copy or the allocator."""
        navbar = Navbar(menu=MenuNode(), parts=[MenuNode()], uids=uids)
        with pytest.raises(MutualExclusionError):
            navbar.render()
        assert uids.peek() is None
        assert not navbar.rendered

    def test_parts_alignment(self, uids) -> None:
        """Parts after the first replace the default alignment class."""
        left = MenuNode(label=Link(text="Brand", href="/"), css_class="main")
        left.add("Home", "/")
        right = MenuNode(css_class="ml-auto")
        right.add("Login", "/login")

        root = Navbar(parts=[left, right], uids=uids).render()

        first, second = root.find_all("ul", class_="navbar-nav")
        assert get_classes(first) == ["navbar-nav", "mr-auto", "main"]
        assert get_classes(second) == ["navbar-nav", "ml-auto"]
        assert root.find("a", class_="navbar-brand").get_text(strip=True) == "Brand"

    def test_empty_children_render_as_dropdown(self, uids) -> None:
        """A node with an empty children list is still a submenu."""
        menu = MenuNode()
        menu.add("Home", "/")
        menu.append(MenuNode(label=Link(text="More"), css_class="dropdown-menu-right", children=[]))

        root = Navbar(menu=menu, uids=uids).render()

        dropdown = root.find("li", class_="dropdown")
        assert dropdown is not None
        menu_div = dropdown.find("div", class_="dropdown-menu")
        assert "dropdown-menu-right" in get_classes(menu_div)
        assert menu_div.find_all("a") == []

    def test_link_attributes_are_merged(self, uids) -> None:
        menu = MenuNode()
        menu.add(Link(text="Docs", href="/docs", css_class="active", target="_blank", icon="book"))
        link = Navbar(menu=menu, uids=uids).render().find("a", class_="nav-link")
        assert get_classes(link) == ["nav-link", "active"]
        assert link["target"] == "_blank"
        assert link.find("span", class_="fa-book") is not None
