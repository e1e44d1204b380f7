"""Bootstrap 4 button element."""

from __future__ import annotations

from bs4.element import Tag

from bootstencil.html_utils import add_class, new_tag, set_attr, set_text

_BTN = "btn"


class Button:
    """Bootstrap button shortcut.

    Attributes:
        label: Text displayed on the button.
        css_class: CSS class(es) besides ``btn`` (e.g. ``"btn-primary"``).
        id: Identifier for script access.
        data_target: ``data-target`` reference to another Bootstrap element.
        type: Button type, ``"button"`` unless it submits a form.
        data_dismiss: ``data-dismiss`` value (e.g. ``"modal"``).
    """

    def __init__(
        self,
        label: str | None = None,
        css_class: str | None = None,
        id: str | None = None,
        *,
        data_target: str | None = None,
        type: str = "button",
        data_dismiss: str | None = None,
    ) -> None:
        self.label = label
        self.css_class = css_class
        self.id = id
        self.data_target = data_target
        self.type = type
        self.data_dismiss = data_dismiss
        self._element: Tag | None = None

    def render(self) -> Tag:
        if self._element is not None:
            return self._element
        element = new_tag("button", {"type": self.type, "class": _BTN})
        add_class(element, self.css_class)
        set_attr(element, "id", self.id)
        set_attr(element, "data-target", self.data_target)
        set_attr(element, "data-dismiss", self.data_dismiss)
        set_text(element, self.label)
        self._element = element
        return element
