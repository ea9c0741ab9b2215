"""
Shared fixtures for cqlbridge tests.

The fake engine in fake_engine.py stands in for the JVM; no Java is
needed to run the suite.
"""

import pytest

from cqlbridge.engine import ReflectiveBinding
from cqlbridge.observability import reset_metrics, set_run_id

import fake_engine


@pytest.fixture(autouse=True)
def clean_observability():
    """Reset global metrics and run ID between tests."""
    reset_metrics()
    set_run_id(None)
    yield
    reset_metrics()
    set_run_id(None)


@pytest.fixture
def binding():
    """Binding over the full-featured fake engine."""
    return ReflectiveBinding(fake_engine.make_namespace())


@pytest.fixture
def basic_binding():
    """Binding over an engine with only fromFile(file, library manager)."""
    return ReflectiveBinding(fake_engine.make_namespace(translator_cls=fake_engine.BasicTranslator))


@pytest.fixture
def cql_dir(tmp_path):
    """Directory with a main library and two dependencies."""
    (tmp_path / "Test.cql").write_text("library Test\ndefine Hello: 'World'\n", encoding="utf-8")
    (tmp_path / "Main.cql").write_text(
        "library Main version '1.0.0'\n"
        "using FHIR version '4.0.1'\n"
        "include Other version '1.0.0'\n"
        "define X: Other.Y\n",
        encoding="utf-8",
    )
    (tmp_path / "Other.cql").write_text(
        "library Other version '1.0.0'\ninclude Common\ndefine Y: 1\n",
        encoding="utf-8",
    )
    (tmp_path / "Common.cql").write_text("library Common\ndefine Z: 2\n", encoding="utf-8")
    return tmp_path
