# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Serializers turning records into Algolia attribute mappings."""


class AlgoliaSerializer(object):
    """Base class for explicit record serializers.

    Subclasses override :meth:`algolia_attributes` to produce one document,
    or :meth:`algolia_objects` to split the record into several documents:

    .. code-block:: python

        class ChapterSerializer(AlgoliaSerializer):

            def algolia_objects(self):
                return [
                    {'title': self.record.title, 'text': chapter}
                    for chapter in self.record.chapters
                ]
    """

    def __init__(self, record):
        """Initialize the serializer.

        :param record: The record to serialize.
        """
        self.record = record

    def algolia_attributes(self):
        """Return the attributes of a single document."""
        return self.record.algolia_attributes()

    def algolia_objects(self):
        """Return the ordered list of documents for the record."""
        return [self.algolia_attributes()]


def resolve_producer(record, serializer_cls=None):
    """Resolve the callable producing the attribute mappings of a record.

    :param record: An instance of a model using
        :class:`~invenio_algolia.models.AlgoliaModelMixin`.
    :param serializer_cls: The serializer registered with the association.
    :returns: A callable returning an ordered list of mappings.
    """
    if serializer_cls is not None:
        return serializer_cls(record).algolia_objects

    def _produce():
        return [record.algolia_attributes()]

    return _produce
