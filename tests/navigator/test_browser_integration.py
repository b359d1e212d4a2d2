"""
End-to-end checks against a real Chromium served by pytest-httpserver.

Skipped when Playwright's Chromium build is not installed
(``playwright install chromium``).
"""

import pytest
import pytest_asyncio

from pagenav.navigator import (
    ElementNotFoundError,
    FrameNotFoundError,
    WaitTimeoutError,
    launch_page_navigator,
)

SELECT_PAGE = """
<html><body>
<select id="pet-select">
  <option value="">--Please choose an option--</option>
  <option value="dog">Dog</option>
  <option value="cat">Cat</option>
  <option value="spider">Spi\u200bder\u00a0</option>
</select>
<script>
  window.changeCount = 0;
  document.getElementById("pet-select").addEventListener("change", () => { window.changeCount += 1; });
</script>
</body></html>
"""

LIST_PAGE = """
<html><body>
<div id="list">
  <div>item 0</div>
  <div><span>item 1</span></div>
</div>
</body></html>
"""

COVERED_BUTTON_PAGE = """
<html><body>
<button id="target" onclick="window.clicks = (window.clicks || 0) + 1">Go</button>
<div id="cover" style="position:fixed;top:0;left:0;width:100%;height:100%;background:white;"></div>
</body></html>
"""

FRAME_PAGE = """
<html><body>
<iframe id="inner" srcdoc="<input id='name'><button id='ok' onclick='window.done = true'>OK</button>"></iframe>
<div id="plain">not a frame</div>
</body></html>
"""


@pytest_asyncio.fixture
async def navigator():
    manager = launch_page_navigator(headless=True, timeout_ms=2_000)
    try:
        nav = await manager.__aenter__()
    except Exception as exc:
        pytest.skip(f"Chromium is not available: {exc}")
    try:
        yield nav
    finally:
        await manager.__aexit__(None, None, None)


def serve(httpserver, path, html):
    httpserver.expect_request(path).respond_with_data(html, content_type="text/html; charset=utf-8")
    return httpserver.url_for(path)


@pytest.mark.asyncio
async def test_select_by_label_ignores_invisible_characters(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/select", SELECT_PAGE))

    await navigator.select("#pet-select", label="Spider")

    assert await navigator.page.eval_on_selector("#pet-select", "el => el.value") == "spider"
    assert await navigator.page.evaluate("window.changeCount") == 1


@pytest.mark.asyncio
async def test_select_by_value(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/select", SELECT_PAGE))

    await navigator.select("#pet-select", value="cat")

    assert await navigator.query_element("#pet-select", "el => el.value") == "cat"


@pytest.mark.asyncio
async def test_query_children_matches_through_descendants(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/list", LIST_PAGE))

    children = await navigator.query_children_as_handles(
        "#list", "el => el.textContent.trim() === 'item 1'"
    )

    assert len(children) == 1
    assert await children[0].inner_text() == "item 1"


@pytest.mark.asyncio
async def test_query_elements_with_xpath(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/list", LIST_PAGE))

    texts = await navigator.query_elements("//div[@id='list']/div", "el => el.textContent.trim()")

    assert texts == ["item 0", "item 1"]


@pytest.mark.asyncio
async def test_simulated_click_reaches_covered_element(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/covered", COVERED_BUTTON_PAGE))
    navigator.update_options(wait_until_visible=False)

    await navigator.click("#target")

    assert await navigator.page.evaluate("window.clicks") == 1


@pytest.mark.asyncio
async def test_pointer_click_on_covered_element_does_not_reach_it(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/covered", COVERED_BUTTON_PAGE))
    navigator.update_options(use_simulated_clicks=False, wait_until_visible=False, timeout_ms=300)

    with pytest.raises(WaitTimeoutError):
        await navigator.click("#target")

    assert await navigator.page.evaluate("window.clicks") is None


@pytest.mark.asyncio
async def test_click_missing_element_raises_after_timeout(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/list", LIST_PAGE))
    navigator.update_options(timeout_ms=300)

    with pytest.raises(ElementNotFoundError) as excinfo:
        await navigator.click("#missing")

    assert excinfo.value.timed_out is True


@pytest.mark.asyncio
async def test_wait_activity_settles_after_load(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/list", LIST_PAGE))

    assert await navigator.wait_activity(idle_time_ms=50, idle_load_time_ms=100) is True
    assert navigator.activity.pending_request_count == 0


@pytest.mark.asyncio
async def test_frame_navigator_acts_inside_iframe(navigator, httpserver):
    await navigator.goto(serve(httpserver, "/frame", FRAME_PAGE))

    inner = await navigator.frame_navigator("#inner")
    await inner.type("#name", "Ada")
    await inner.click("#ok")

    assert inner.activity is navigator.activity
    assert await inner.query_element("#name", "el => el.value") == "Ada"
    assert await inner.frame.evaluate("window.done") is True

    with pytest.raises(FrameNotFoundError):
        await navigator.frame_navigator("#plain")


@pytest.mark.asyncio
async def test_download_lands_in_downloads_path(httpserver, tmp_path):
    downloads = tmp_path / "downloads"
    httpserver.expect_request("/report.csv").respond_with_data(
        "a,b\n1,2\n",
        content_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="report.csv"'},
    )
    page_url = serve(
        httpserver,
        "/export",
        f'<html><body><a id="export" href="{httpserver.url_for("/report.csv")}">Export</a></body></html>',
    )

    manager = launch_page_navigator(headless=True, downloads_path=downloads, timeout_ms=5_000)
    try:
        navigator = await manager.__aenter__()
    except Exception as exc:
        pytest.skip(f"Chromium is not available: {exc}")
    try:
        await navigator.goto(page_url)
        async with navigator.expect_download() as download_info:
            await navigator.click("#export")
        download = await download_info.value

        assert download.suggested_filename == "report.csv"
        assert (await download.path()).parent.resolve() == downloads.resolve()
        await download.save_as(downloads / download.suggested_filename)
        assert (downloads / "report.csv").read_text() == "a,b\n1,2\n"
    finally:
        await manager.__aexit__(None, None, None)
