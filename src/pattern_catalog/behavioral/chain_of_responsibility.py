"""Chain of Responsibility: pass a request along a chain of handlers.

Problem:
    A GUI shows context help when the user presses F1. The focused widget
    may have its own help text, or it may not, in which case the enclosing
    panel or dialog should answer instead. Hard-wiring that lookup into every
    widget couples them all to the container hierarchy.

Solution:
    Each component keeps a reference to its container. ``show_help`` either
    handles the request (when the component has help text) or forwards it
    to the container. The request stops at the first component able to
    handle it; if no one can, nothing happens.

    Here a button without a tooltip sits in a panel without modal help,
    inside a dialog that links to a wiki page, so the dialog answers.

Use cases:
    1. Requests of various kinds must be processed in different ways, and
       the exact handlers are not known beforehand.
    2. Several handlers must run in a particular order.
    3. The set of handlers and their order should change at runtime.

Pros:
    1. The order of request handling is under control.
    2. Single Responsibility Principle: the classes that invoke operations
       are decoupled from the classes that perform them.
    3. Open/Closed Principle: new handlers slot into the chain without
       breaking client code.

Cons:
    1. Some requests may end up unhandled.
"""
from typing import Optional


class BaseComponent:
    """A link in the help chain."""

    def __init__(self) -> None:
        self.container: Optional["BaseComponent"] = None

    def set_container(self, container: Optional["BaseComponent"]) -> None:
        self.container = container

    def show_help(self) -> None:
        # end of chain: unhandled requests are dropped
        if self.container is not None:
            self.container.show_help()


class Button(BaseComponent):
    def __init__(self, tooltip_text: Optional[str]):
        super().__init__()
        self.tooltip_text = tooltip_text

    def show_help(self) -> None:
        if self.tooltip_text is not None:
            print(f"Button Help: {self.tooltip_text}")
        else:
            super().show_help()


class Panel(BaseComponent):
    def __init__(self, modal_help_text: Optional[str]):
        super().__init__()
        self.modal_help_text = modal_help_text

    def show_help(self) -> None:
        if self.modal_help_text is not None:
            print(f"Panel Help: {self.modal_help_text}")
        else:
            super().show_help()


class Dialog(BaseComponent):
    def __init__(self, wiki_page_url: Optional[str]):
        super().__init__()
        self.wiki_page_url = wiki_page_url

    def show_help(self) -> None:
        if self.wiki_page_url is not None:
            print(f"Dialog Help: Opening wiki page at {self.wiki_page_url}")
        else:
            super().show_help()


def main() -> None:
    """Press F1 on a button whose help comes from the enclosing dialog."""
    dialog = Dialog("http://help.wiki/page")
    panel = Panel(None)
    button = Button(None)

    button.set_container(panel)
    panel.set_container(dialog)

    button.show_help()


if __name__ == "__main__":
    main()
