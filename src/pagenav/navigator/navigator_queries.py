"""Element query mixin for PageNavigator. Queries never wait."""

from __future__ import annotations

from typing import Any, List, Optional

from .common import to_driver_selector
from .exceptions import ElementNotFoundError
from .scripts import (
    PageFunctionLike,
    find_first_descendant_script,
    map_elements_script,
    matching_children_script,
    page_function,
)


class NavigatorQueryMixin:
    async def query_element_handle(self, selector: str) -> Optional[Any]:
        """
        Queries an element using css selector or xpath.
        Assumes an xpath expression starts with '//'.
        """
        return await self._frame.query_selector(to_driver_selector(selector))

    async def query_element_handles(self, selector: str) -> List[Any]:
        return await self._frame.query_selector_all(to_driver_selector(selector))

    async def query_elements(self, selector: str, map_fn: PageFunctionLike) -> List[Any]:
        """
        Map every element matching ``selector`` through ``map_fn`` inside the page.

        ``map_fn`` is JavaScript source called as ``map_fn(element, index)``; its
        return values must be serializable.
        """
        script = map_elements_script(page_function(map_fn))
        return await self._frame.locator(to_driver_selector(selector)).evaluate_all(script)

    async def query_element(self, selector: str, map_fn: PageFunctionLike) -> Optional[Any]:
        values = await self.query_elements(selector, map_fn)
        return values[0] if values else None

    async def query_element_handle_with_fn(
        self,
        predicate_fn: PageFunctionLike,
        context: Optional[Any] = None,
    ) -> Optional[Any]:
        """First descendant of ``context`` (default: the document) satisfying ``predicate_fn``."""
        script = find_first_descendant_script(page_function(predicate_fn))
        handle = await self._frame.evaluate_handle(script, context)
        element = handle.as_element()
        if element is None:
            await handle.dispose()
        return element

    async def query_children_as_handles(
        self,
        parent_selector: str,
        descendant_fn: PageFunctionLike,
    ) -> List[Any]:
        """
        Immediate children of ``parent_selector`` for which the child itself or
        any of its descendants satisfies ``descendant_fn``, in document order.
        """
        parent = await self.query_element_handle(parent_selector)
        if parent is None:
            raise ElementNotFoundError("Parent element not found", selector=parent_selector)

        array_handle = await parent.evaluate_handle(
            matching_children_script(page_function(descendant_fn))
        )
        try:
            properties = await array_handle.get_properties()
            indexed = sorted(
                (int(key), value) for key, value in properties.items() if str(key).isdigit()
            )
        finally:
            await array_handle.dispose()

        children: List[Any] = []
        for _, value in indexed:
            element = value.as_element()
            if element is not None:
                children.append(element)
        return children
