import os

import pytest


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    missing = not (os.getenv("AEROFS_TEST_HOST") and os.getenv("AEROFS_TEST_TOKEN"))
    if not missing:
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason="AEROFS_TEST_HOST / AEROFS_TEST_TOKEN not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def aerofs_credentials() -> tuple[str, str]:
    host = os.getenv("AEROFS_TEST_HOST")
    token = os.getenv("AEROFS_TEST_TOKEN")
    if not host or not token:
        pytest.fail("AEROFS_TEST_HOST and AEROFS_TEST_TOKEN must be set to run integration tests.")
    return host, token
