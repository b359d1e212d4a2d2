"""
In-page JavaScript used by the navigator.

Functions cannot cross into the page's execution context, so caller-supplied
predicates and mappers travel as source text (`PageFunction`) and are spliced
into the scripts below before evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PageFunction:
    """JavaScript function source evaluated inside the page, e.g. ``"el => el.checked"``."""

    source: str

    def __post_init__(self) -> None:
        if not isinstance(self.source, str) or not self.source.strip():
            raise ValueError("PageFunction source must be a non-empty string")

    def __str__(self) -> str:
        return self.source


PageFunctionLike = Union[str, PageFunction]


def page_function(value: PageFunctionLike) -> PageFunction:
    if isinstance(value, PageFunction):
        return value
    if isinstance(value, str):
        return PageFunction(value)
    raise TypeError(
        f"Expected JavaScript source or PageFunction, got {type(value).__name__}. "
        "Python callables cannot run inside the page."
    )


SIMULATED_CLICK_JS = "element => element.click()"

SCROLL_TO_BOTTOM_JS = "element => { element.scrollTop = element.scrollHeight; }"

# Option labels/values can carry invisible bytes (direction marks, NBSP, control
# characters); only printable ASCII takes part in the comparison. A missing
# option makes the assignment throw inside the page.
SELECT_OPTION_JS = r"""
(selectElement, selectOption) => {
    const clean = (text) => String(text == null ? "" : text).replace(/[^\x20-\x7E]/g, "");
    const candidates = Array.from(selectElement.children);
    let optionElement;
    if (selectOption.label != null) {
        optionElement = candidates.find((option) => clean(option.label) === selectOption.label);
    } else {
        optionElement = candidates.find((option) => clean(option.value) === selectOption.value);
    }
    optionElement.selected = true;
    selectElement.dispatchEvent(new Event("change", { bubbles: true }));
}
"""


def map_elements_script(map_fn: PageFunction) -> str:
    return f"(elements) => elements.map((element, index) => ({map_fn.source})(element, index))"


def find_first_descendant_script(predicate: PageFunction) -> str:
    # Depth-first, document order. Without a context the whole document is scanned.
    return f"""
(context) => {{
    const predicate = ({predicate.source});
    const stack = context ? Array.from(context.children).reverse() : [document.documentElement];
    while (stack.length) {{
        const element = stack.pop();
        if (predicate(element)) {{
            return element;
        }}
        for (let i = element.children.length - 1; i >= 0; i--) {{
            stack.push(element.children[i]);
        }}
    }}
    return null;
}}
"""


def matching_children_script(predicate: PageFunction) -> str:
    return f"""
(parent) => {{
    const predicate = ({predicate.source});
    const matches = (element) => predicate(element) || Array.from(element.children).some((child) => matches(child));
    return Array.from(parent.children).filter((child) => matches(child));
}}
"""
