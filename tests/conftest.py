"""Pytest configuration and shared fixtures for the apidoc2md test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from apidoc2md.ast import DocDeclarationReference, DocMemberReference
from apidoc2md.emitters import MappingDeclarationResolver, MarkdownEmitter, ResolvedDeclaration
from apidoc2md.emitters.context import MarkdownEmitterContext
from apidoc2md.utils.indented_writer import IndentedWriter

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def emitter() -> MarkdownEmitter:
    """Provide a core Markdown emitter."""
    return MarkdownEmitter()


@pytest.fixture
def context() -> MarkdownEmitterContext:
    """Provide a fresh emission context writing into an empty buffer.

    Returns
    -------
    MarkdownEmitterContext
        Context whose writer has not written anything yet.

    """
    return MarkdownEmitterContext(writer=IndentedWriter())


@pytest.fixture
def button_reference() -> DocDeclarationReference:
    """Provide a declaration reference to ``widgets#Button.render``."""
    return DocDeclarationReference(
        package_name="widgets",
        member_references=(DocMemberReference("Button"), DocMemberReference("render")),
    )


@pytest.fixture
def resolver() -> MappingDeclarationResolver:
    """Provide a resolver that knows ``widgets#Button.render`` and ``widgets#Button``."""
    return MappingDeclarationResolver(
        {
            "widgets#Button.render": ResolvedDeclaration("./widgets.button.render.md", "Button.render()"),
            "widgets#Button": ResolvedDeclaration("./widgets.button.md", "Button"),
        }
    )
