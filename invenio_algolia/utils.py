# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Utility functions for Algolia index names and object identifiers."""

from flask import current_app

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def as_bool(value):
    """Interpret a configuration or environment value as a boolean."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return bool(value)


def suffix_index(index, suffix=None, app=None):
    """Suffixes the given index name.

    :param index: Name of the index to suffix.
    :param suffix: Force a suffix.
    :param app: Flask app to get the "invenio-algolia" extension from.
    :returns: A string with the new index name suffixed if needed.
    """
    if suffix is None:
        app = app or current_app
        suffix = app.extensions["invenio-algolia"].config.index_suffix
    return build_index_from_parts(index, suffix)


def build_index_from_parts(*parts):
    """Build an index name from parts.

    :param parts: String values that will be joined by underscores ("_").
    """
    return "_".join([part for part in parts if part])


def build_index_name(index, suffix=None, app=None):
    """Build the remote name of an index definition.

    :param index: An :class:`~invenio_algolia.api.AlgoliaIndex` subclass or
        a logical index name.
    :param suffix: The suffix to append to the index name.
    :param app: Flask app passed to ``suffix_index``.
    """
    if not isinstance(index, str):
        index = index.get_name()
    return suffix_index(index, suffix=suffix, app=app)


def fragment_object_id(model_id, fragment_index):
    """Build the object identifier of one fragment of a split record."""
    return "{0}/{1}".format(model_id, fragment_index)


def object_ids(model_id, count):
    """Return the object identifiers of a record split in ``count`` parts.

    A record that produced a single document is identified by its model
    identifier alone.
    """
    if count == 1:
        return [model_id]
    return [fragment_object_id(model_id, i) for i in range(count)]


def model_id_filter(model_id):
    """Build the Algolia filter matching every fragment of a record."""
    escaped = model_id.replace("\\", "\\\\").replace('"', '\\"')
    return 'model_id:"{0}"'.format(escaped)
