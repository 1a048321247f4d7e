"""Fixtures describing how formguard is layered.

``domain`` holds the model and the ports. ``application`` builds fields and
forms and walks object graphs through those ports. ``infrastructure`` holds
the validator registry, metadata loading and console reporting.

Two groups of top-level modules sit beside the layers: the built-in
``constraints`` and ``transformers`` (used by application and
infrastructure), and ``factory``, which wires infrastructure adapters into
a Validator and must stay the only place that does.
"""

from pathlib import Path

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    return get_evaluable_architecture(str(SRC_DIR), str(SRC_DIR / "formguard"))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """Modules are named from the source root, e.g. 'src.formguard.domain'."""
    return (
        LayeredArchitecture()
        .layer("domain")
        .containing_modules(["src.formguard.domain"])
        .layer("application")
        .containing_modules(["src.formguard.application"])
        .layer("infrastructure")
        .containing_modules(["src.formguard.infrastructure"])
        .layer("builtins")
        .containing_modules(["src.formguard.constraints", "src.formguard.transformers"])
        .layer("composition")
        .containing_modules(["src.formguard.factory"])
    )
