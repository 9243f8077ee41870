# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Mock module used to test syncing of models."""

from invenio_algolia import AlgoliaIndex, AlgoliaModelMixin, AlgoliaSerializer


class Product(AlgoliaModelMixin):
    """Product with its own attributes method."""

    def __init__(self, id, name, published=True):
        """Initialize the product."""
        self.id = id
        self.name = name
        self.published = published

    def algolia_attributes(self):
        """Index only the name."""
        return {"name": self.name}

    def algolia_indexable(self):
        """Index only published products."""
        return self.published


class Tag(AlgoliaModelMixin):
    """Tag relying on the generic attribute dump."""

    def __init__(self, id, label):
        """Initialize the tag."""
        self.id = id
        self.label = label
        self._cache = {}


class Book(AlgoliaModelMixin):
    """Book split in one document per chapter."""

    def __init__(self, id, title, chapters):
        """Initialize the book."""
        self.id = id
        self.title = title
        self.chapters = chapters


class Article(AlgoliaModelMixin):
    """Article with overridden identity."""

    def __init__(self, slug, title):
        """Initialize the article."""
        self.slug = slug
        self.title = title

    def algolia_model_name(self):
        """Use a shorter type identifier."""
        return "Post"

    def algolia_primary_key(self):
        """Identify articles by slug."""
        return self.slug


class ChapterSerializer(AlgoliaSerializer):
    """Serialize each chapter of a book in its own document."""

    def algolia_objects(self):
        """Return one document per chapter."""
        return [
            {"title": self.record.title, "chapter": chapter}
            for chapter in self.record.chapters
        ]


class ShoutingSerializer(AlgoliaSerializer):
    """Serializer trying to override reserved keys."""

    def algolia_attributes(self):
        """Return the upper-cased name."""
        return {
            "name": self.record.name.upper(),
            "objectID": "hijacked",
            "model_name": "Hijacked",
        }


class ProductIndex(AlgoliaIndex):
    """Products index."""

    settings = {
        "searchableAttributes": ["name"],
        "attributesForFaceting": ["category"],
    }


class EverythingIndex(AlgoliaIndex):
    """Index receiving every model."""

    name = "everything"
    settings = {"searchableAttributes": ["name", "title"]}


class BookIndex(AlgoliaIndex):
    """Books index."""


def register_indexes(registry):
    """Register the mock associations."""
    registry.register(Book, BookIndex, ChapterSerializer)
    registry.register(Tag, EverythingIndex)
