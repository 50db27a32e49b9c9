"""Display package - presenters and HTML rendering for lookup results."""

from meteowidget.display.presenters import ConsolePresenter, HtmlPresenter
from meteowidget.display.protocols import MockPresenter, Presenter
from meteowidget.display.render import CardContextBuilder, TemplateRenderer

__all__ = [
    "CardContextBuilder",
    "ConsolePresenter",
    "HtmlPresenter",
    "MockPresenter",
    "Presenter",
    "TemplateRenderer",
]
