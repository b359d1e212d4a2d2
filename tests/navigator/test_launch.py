import pytest

from fake_driver import FakePage
from pagenav.navigator import ActivityMonitor, launch_page_navigator
from pagenav.navigator import launch as launch_module


class FakeContext:
    def __init__(self, log):
        self.log = log
        self.page = FakePage()

    async def new_page(self):
        return self.page

    async def close(self):
        self.log.append("context.close")


class FakeBrowser:
    def __init__(self, log):
        self.log = log
        self.context_kwargs = None
        self.context = FakeContext(log)

    async def new_context(self, **kwargs):
        self.context_kwargs = kwargs
        return self.context

    async def close(self):
        self.log.append("browser.close")


class FakeLauncher:
    def __init__(self, log):
        self.log = log
        self.launch_kwargs = None
        self.browser = FakeBrowser(log)

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self):
        self.log = []
        self.chromium = FakeLauncher(self.log)
        self.firefox = FakeLauncher(self.log)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.log.append("playwright.stop")


@pytest.fixture
def fake_playwright(monkeypatch):
    playwright = FakePlaywright()
    monkeypatch.setattr(launch_module, "async_playwright", lambda: playwright)
    return playwright


@pytest.mark.asyncio
async def test_launch_passes_downloads_path_and_accepts_downloads(fake_playwright, tmp_path):
    downloads = tmp_path / "downloads"

    async with launch_page_navigator(
        launch_args=["--disable-gpu"],
        downloads_path=downloads,
        wait_idle_time_ms=200,
    ) as navigator:
        assert navigator.page is fake_playwright.chromium.browser.context.page
        assert navigator.options.wait_idle_time_ms == 200
        assert isinstance(navigator.activity, ActivityMonitor)

    launcher = fake_playwright.chromium
    assert launcher.launch_kwargs == {
        "headless": True,
        "args": ["--disable-gpu"],
        "downloads_path": str(downloads),
    }
    assert downloads.is_dir()
    assert launcher.browser.context_kwargs == {"accept_downloads": True}


@pytest.mark.asyncio
async def test_launch_without_downloads_path_leaves_driver_default(fake_playwright):
    async with launch_page_navigator(browser_type="firefox", headless=False):
        pass

    assert fake_playwright.firefox.launch_kwargs == {"headless": False, "args": []}
    assert fake_playwright.firefox.browser.context_kwargs == {"accept_downloads": True}


@pytest.mark.asyncio
async def test_launch_closes_everything_in_reverse_order(fake_playwright):
    with pytest.raises(RuntimeError):
        async with launch_page_navigator() as navigator:
            raise RuntimeError("boom")

    assert navigator.activity.stopped is True
    assert fake_playwright.log == ["context.close", "browser.close", "playwright.stop"]


@pytest.mark.asyncio
async def test_launch_rejects_unknown_browser_type(fake_playwright):
    with pytest.raises(ValueError):
        async with launch_page_navigator(browser_type="netscape"):
            pass

    assert fake_playwright.log == []


@pytest.mark.asyncio
async def test_expect_download_uses_navigator_timeout(fake_playwright):
    async with launch_page_navigator(timeout_ms=4_000) as navigator:
        assert navigator.expect_download() == ("download_waiter", {"timeout": 4_000})
        navigator.expect_download(timeout=0)

        assert navigator.page.download_waits == [{"timeout": 4_000}, {"timeout": 0}]
