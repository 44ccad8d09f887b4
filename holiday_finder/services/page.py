"""
Page model for the holiday lookup page.

Components never build markup. They look elements up by their stable id
and mutate them; the renderers in render.py turn the result into HTML or
plain text.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Union

COUNTRY_SELECT_ID = "country-select"
YEAR_INPUT_ID = "year-input"
SEARCH_BUTTON_ID = "search-btn"
RESULTS_ID = "holiday-results"
SPINNER_ID = "loading-spinner"


@dataclass
class Option:
    value: str
    label: str
    disabled: bool = False


@dataclass
class SelectControl:
    id: str
    options: List[Option] = field(default_factory=list)
    value: str = ""

    def append(self, option: Option) -> None:
        self.options.append(option)

    @property
    def labels(self) -> List[str]:
        return [o.label for o in self.options]


@dataclass
class InputField:
    id: str
    value: str = ""


@dataclass
class Button:
    id: str
    label: str


@dataclass(frozen=True)
class Message:
    """A single line of placeholder text in the results area."""
    text: str
    is_error: bool = False


@dataclass(frozen=True)
class HolidayCard:
    name: str
    date_label: str
    type: str
    global_label: str


ResultNode = Union[Message, HolidayCard]


@dataclass
class ResultsContainer:
    id: str
    children: List[ResultNode] = field(default_factory=list)

    def clear(self) -> None:
        self.children = []

    def append(self, node: ResultNode) -> None:
        self.children.append(node)

    def replace(self, nodes: List[ResultNode]) -> None:
        self.children = list(nodes)

    @property
    def cards(self) -> List[HolidayCard]:
        return [c for c in self.children if isinstance(c, HolidayCard)]

    @property
    def messages(self) -> List[Message]:
        return [c for c in self.children if isinstance(c, Message)]


@dataclass
class LoadingIndicator:
    id: str
    visible: bool = False

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False


Element = Union[SelectControl, InputField, Button, ResultsContainer, LoadingIndicator]


class Page:
    """Elements of the page, addressable by id."""

    def __init__(self, elements: List[Element]):
        self._elements: Dict[str, Element] = {e.id: e for e in elements}

    @classmethod
    def build(cls) -> "Page":
        """Create the standard holiday search page with empty controls."""
        return cls([
            SelectControl(COUNTRY_SELECT_ID, options=[Option("", "Select a country")]),
            InputField(YEAR_INPUT_ID),
            Button(SEARCH_BUTTON_ID, "Search"),
            ResultsContainer(RESULTS_ID),
            LoadingIndicator(SPINNER_ID),
        ])

    def get(self, element_id: str) -> Element:
        """Raises KeyError if the page has no element with this id."""
        return self._elements[element_id]

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._elements

    def _typed(self, element_id: str, kind: type):
        element = self.get(element_id)
        if not isinstance(element, kind):
            raise TypeError(f"Element {element_id!r} is a {type(element).__name__}, not {kind.__name__}")
        return element

    def select(self, element_id: str = COUNTRY_SELECT_ID) -> SelectControl:
        return self._typed(element_id, SelectControl)

    def input(self, element_id: str = YEAR_INPUT_ID) -> InputField:
        return self._typed(element_id, InputField)

    def button(self, element_id: str = SEARCH_BUTTON_ID) -> Button:
        return self._typed(element_id, Button)

    def results(self, element_id: str = RESULTS_ID) -> ResultsContainer:
        return self._typed(element_id, ResultsContainer)

    def spinner(self, element_id: str = SPINNER_ID) -> LoadingIndicator:
        return self._typed(element_id, LoadingIndicator)
