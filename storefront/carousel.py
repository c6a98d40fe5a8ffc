"""Featured-products carousel widget."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from storefront.errors import InvalidArgument
from storefront.events import PRODUCT_ADD, EventChannel
from storefront.models import Slide
from storefront.rendering import format_price


class Carousel(Vertical):
    """Shows one slide at a time; arrows are hidden at either end."""

    DEFAULT_CSS = """
    Carousel {
        height: auto;
        border: round $secondary;
        padding: 0 1;
    }

    Carousel #carousel-slide {
        height: 2;
    }

    Carousel #carousel-controls {
        height: 3;
    }

    Carousel Button {
        min-width: 5;
        width: 5;
    }
    """

    def __init__(self, slides: Sequence[Slide], *, id: str | None = None) -> None:
        if not slides:
            raise InvalidArgument("Slides must be a non-empty list")
        super().__init__(id=id)
        self.slides = list(slides)
        self.index = 0
        self.product_add: EventChannel[str] = EventChannel(PRODUCT_ADD)

    @property
    def current(self) -> Slide:
        return self.slides[self.index]

    def compose(self) -> ComposeResult:
        yield Static(id="carousel-slide")
        with Horizontal(id="carousel-controls"):
            yield Button("‹", id="carousel-prev")
            yield Button("+", id="carousel-add", variant="primary")
            yield Button("›", id="carousel-next")

    def on_mount(self) -> None:
        self._refresh_slide()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "carousel-prev":
            self.show(self.index - 1)
        elif event.button.id == "carousel-next":
            self.show(self.index + 1)
        elif event.button.id == "carousel-add":
            self.product_add.emit(self.current.id)
        else:
            return
        event.stop()

    def show(self, index: int) -> None:
        if not (0 <= index < len(self.slides)):
            return
        self.index = index
        self._refresh_slide()

    def _refresh_slide(self) -> None:
        slide = self.current
        text = Text()
        text.append(slide.name, style="bold")
        text.append(f"\n{format_price(slide.price)}")
        text.append(f"  {self.index + 1}/{len(self.slides)}", style="dim")
        self.query_one("#carousel-slide", Static).update(text)
        self.query_one("#carousel-prev", Button).display = self.index > 0
        self.query_one("#carousel-next", Button).display = self.index < len(self.slides) - 1
