"""测试公共工具"""

from pathlib import Path

import pytest

from appmeta.core.models import App, Maintainer

TESTDATA_DIR = Path(__file__).parent / "testdata"


def build_valid_app(title: str = "title", version: str = "version", description: str = "description") -> App:
    return App(
        title=title,
        version=version,
        description=description,
        maintainers=(Maintainer(name="name", email="name@example.com"),),
        company="company",
        website="http://example.com",
        source="https://git.example.com/repo",
        license="license",
    )


@pytest.fixture
def load_testdata():
    """读取 testdata 目录下的文件内容"""

    def _load(filename: str) -> bytes:
        return (TESTDATA_DIR / filename).read_bytes()

    return _load
