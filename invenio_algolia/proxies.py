# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Proxy objects for easier access to application objects."""

from flask import current_app
from werkzeug.local import LocalProxy


def _get_current_algolia():
    """Return current state of the Algolia extension."""
    return current_app.extensions["invenio-algolia"]


current_algolia = LocalProxy(_get_current_algolia)
current_algolia_client = LocalProxy(lambda: _get_current_algolia().client)
current_algolia_indexer = LocalProxy(lambda: _get_current_algolia().indexer)
