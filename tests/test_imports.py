"""Tests for Tempora package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_tempora() -> None:
    """Import tempora package succeeds."""
    import tempora

    assert hasattr(tempora, "__version__")
    assert tempora.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import tempora.core submodule succeeds."""
    from tempora import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import tempora.units submodule succeeds."""
    from tempora import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import tempora.format submodule succeeds."""
    from tempora import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import tempora.convert submodule succeeds."""
    from tempora import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import tempora.arithmetic submodule succeeds."""
    from tempora import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_public_names_resolve() -> None:
    """Every name in tempora.__all__ is an attribute of the package."""
    import tempora

    for name in tempora.__all__:
        assert hasattr(tempora, name), name
