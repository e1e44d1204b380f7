"""Bootstrap 4 modal dialog."""

from __future__ import annotations

from bs4.element import Tag

from bootstencil.button import Button
from bootstencil.html_utils import add_class, is_empty, set_attr, set_text
from bootstencil.templates import HtmlTemplate
from bootstencil.uid import UidAllocator


class Modal(HtmlTemplate):
    """Modal dialog rendered from ``bootstrap4/modal.html``.

    ``header``, ``body`` and ``footer`` are available right after
    construction for custom content. An empty header or footer is dropped
    from the output.
    """

    template_name = "bootstrap4/modal.html"
    uid_prefix = "bs4modal"

    def __init__(
        self,
        *,
        title: str | None = None,
        text: str | None = None,
        id: str | None = None,
        css_class: str | None = None,
        uids: UidAllocator | None = None,
    ) -> None:
        super().__init__(uids=uids)
        self.title = title
        self.text = text
        self.id = id
        self.css_class = css_class
        self.header = self.target("header")
        self.body = self.target("body")
        self.footer = self.target("footer")

    def add_button(
        self,
        label: str,
        css_class: str | None = "btn-secondary",
        *,
        dismiss: bool = False,
        id: str | None = None,
    ) -> Tag:
        """Append a button to the footer and return it."""
        button = Button(label, css_class, id, data_dismiss="modal" if dismiss else None)
        element = button.render()
        self.footer.append(element)
        return element

    def _render(self) -> None:
        set_attr(self.root, "id", self.id)
        add_class(self.root, self.css_class)
        # The title goes away with a cleared header; no label to point at then.
        if "title" in self.targets:
            uid = self.next_uid()
            set_attr(self.root, "aria-labelledby", uid)
            title = self.target("title")
            title["id"] = uid
            set_text(title, self.title)
        set_text(self.body, self.text)
        if is_empty(self.header):
            self.header.extract()
        if is_empty(self.footer):
            self.footer.extract()
