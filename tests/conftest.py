import urllib.request

import pytest

PAGES = {
    "index.html": "<h1>home</h1>",
    "about.html": "<h1>about</h1>",
    "docs/index.html": "<h1>docs</h1>",
}


@pytest.fixture
def pages():
    return dict(PAGES)


@pytest.fixture
def site(tmp_path):
    root = tmp_path / "site"
    root.mkdir()
    for name, content in PAGES.items():
        page = root / name
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text(content)
    (root / "empty").mkdir()
    (tmp_path / "secret.txt").write_text("outside the root")
    return root


@pytest.fixture
def fetch():
    # Bypass any proxy configured in the environment
    opener = urllib.request.build_opener(urllib.request.ProxyHandler({}))

    def _fetch(url):
        with opener.open(url, timeout=5) as resp:
            return resp.status, resp.read().decode("utf-8")

    return _fetch
