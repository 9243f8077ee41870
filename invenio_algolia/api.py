# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Index definitions and document assembly."""

import copy
from collections import namedtuple

from .utils import build_index_name, fragment_object_id

Association = namedtuple("Association", ["model", "index", "serializer"])
"""Pairing of a model type with an index definition and a serializer."""


class AlgoliaIndex(object):
    """Base class for Algolia index definitions.

    .. code-block:: python

        class ProductIndex(AlgoliaIndex):

            settings = {
                'searchableAttributes': ['name', 'description'],
                'attributesForFaceting': ['category'],
            }
    """

    name = None
    """Logical name of the index, defaults to the class name."""

    settings = {}
    """Static settings pushed to Algolia."""

    @classmethod
    def get_name(cls):
        """Return the logical (unsuffixed) name of the index."""
        return cls.name or cls.__name__

    @classmethod
    def get_index_name(cls, suffix=None, app=None):
        """Return the remote name of the index."""
        return build_index_name(cls.get_name(), suffix=suffix, app=app)

    @classmethod
    def get_settings(cls):
        """Return a copy of the settings to push.

        ``model_id`` is always declared as a filter-only facet, so that every
        fragment of a record can be deleted at once.
        """
        settings = copy.deepcopy(cls.settings)
        facets = settings.setdefault("attributesForFaceting", [])
        if not any(
            facet == "model_id" or facet.endswith("(model_id)") for facet in facets
        ):
            facets.append("filterOnly(model_id)")
        return settings


def build_document(record, attributes, fragment_index=0, total_fragments=1):
    """Build one document ready for upload.

    :param record: The source record.
    :param attributes: The mapping produced by the serializer.
    :param fragment_index: Position of the document among the fragments.
    :param total_fragments: Number of documents produced for the record.
    """
    model_id = record.algolia_model_id()
    if total_fragments > 1:
        object_id = fragment_object_id(model_id, fragment_index)
    else:
        object_id = model_id

    document = dict(attributes or {})
    document.update(
        objectID=object_id,
        model_name=record.algolia_model_name(),
        model_id=model_id,
    )
    return document


def build_documents(record, mappings):
    """Build the documents of every fragment of a record."""
    mappings = list(mappings)
    total = len(mappings)
    return [
        build_document(record, attributes, i, total)
        for i, attributes in enumerate(mappings)
    ]
