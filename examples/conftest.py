"""pytest wiring for the razorgen examples.

Each example directory holds an ``app.py`` that builds a syntax tree at
module level and stores the generated render-function source in
``output``. Tests receive that module's globals through ``example_app``;
``main()`` is not run.
"""

import runpy
from pathlib import Path
from types import SimpleNamespace

import pytest

from razorgen import Node


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Run the ``app.py`` beside the requesting test and expose its globals."""
    app_path = Path(request.path).with_name("app.py")
    namespace = runpy.run_path(str(app_path), run_name=f"example_{app_path.parent.name}")

    assert isinstance(namespace.get("tree"), Node), f"{app_path} must define a syntax tree"
    assert isinstance(namespace.get("output"), str), f"{app_path} must define generated output"
    return SimpleNamespace(**namespace)
