import pytest

from type_detective import configure


@pytest.fixture(autouse=True)
def default_config():
    configure(mode="merge", indent=2, indent_type="space", array_style="postfix")
    yield
    configure(mode="merge", indent=2, indent_type="space", array_style="postfix")
