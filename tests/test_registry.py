# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Registry tests."""

import pytest
from mock import Mock, patch
from mock_module import (
    Book,
    BookIndex,
    ChapterSerializer,
    EverythingIndex,
    Product,
    ProductIndex,
    Tag,
    register_indexes,
)

from invenio_algolia import AlgoliaRegistry, Association
from invenio_algolia.errors import (
    AlgoliaError,
    AssociationAlreadyRegisteredError,
    RegistryFrozenError,
)


def test_register_keeps_order():
    """Test that associations are kept in registration order."""
    registry = AlgoliaRegistry()
    first = registry.register(Product, ProductIndex)
    second = registry.register(Product, EverythingIndex)

    assert first == Association(Product, ProductIndex, None)
    assert registry.associations_for(Product) == (first, second)
    assert registry.associations_for(Product(1, "Widget")) == (first, second)
    assert registry.associations_for(Tag) == ()


def test_models_and_indexes():
    """Test listing of registered models and indexes."""
    registry = AlgoliaRegistry()
    registry.register(Product, ProductIndex)
    register_indexes(registry)
    registry.register(Product, EverythingIndex)

    assert registry.models == [Product, Book, Tag]
    assert registry.indexes == [ProductIndex, EverythingIndex, BookIndex]
    assert len(list(registry)) == 4


def test_duplicate_association():
    """Test that an association cannot be registered twice."""
    registry = AlgoliaRegistry()
    registry.register(Product, ProductIndex)
    with pytest.raises(AssociationAlreadyRegisteredError):
        registry.register(Product, ProductIndex, ChapterSerializer)
    assert len(registry.associations_for(Product)) == 1


def test_frozen_registry():
    """Test that a frozen registry refuses registrations."""
    registry = AlgoliaRegistry()
    assert not registry.frozen
    registry.freeze()
    assert registry.frozen
    with pytest.raises(RegistryFrozenError) as excinfo:
        registry.register(Product, ProductIndex)
    assert isinstance(excinfo.value, AlgoliaError)


def test_invalid_registration():
    """Test validation of the registered classes."""
    registry = AlgoliaRegistry()
    with pytest.raises(TypeError):
        registry.register(Product, ProductIndex())
    with pytest.raises(TypeError):
        registry.register(Product, ProductIndex, dict)


def test_load_config():
    """Test registrations given as import strings."""
    registry = AlgoliaRegistry()
    registry.load_config(
        [
            ("mock_module.Product", "mock_module.ProductIndex"),
            ("mock_module.Book", BookIndex, "mock_module.ChapterSerializer"),
        ]
    )
    assert registry.associations_for(Product) == (
        Association(Product, ProductIndex, None),
    )
    assert registry.associations_for(Book) == (
        Association(Book, BookIndex, ChapterSerializer),
    )


def test_load_entry_point_group():
    """Test registrations from an entry point group."""
    ep = Mock()
    ep.load.return_value = register_indexes
    registry = AlgoliaRegistry()
    with patch(
        "invenio_algolia.registry.entry_points", return_value=[ep]
    ) as mock_entry_points:
        registry.load_entry_point_group("invenio_algolia.indexes")

    mock_entry_points.assert_called_once_with(group="invenio_algolia.indexes")
    assert [a.index for a in registry] == [BookIndex, EverythingIndex]
