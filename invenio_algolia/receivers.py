# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Receivers syncing models to Algolia when database changes are committed.

Connect :func:`index_record_modification` to the ``models_committed`` signal
of Flask-SQLAlchemy:

.. code-block:: python

    from flask_sqlalchemy.track_modifications import models_committed
    from invenio_algolia.receivers import index_record_modification

    models_committed.connect(index_record_modification)
"""

from .models import AlgoliaModelMixin
from .proxies import current_algolia_indexer

CHANGE_EVENTS = {
    "insert": "created",
    "update": "updated",
    "delete": "destroyed",
}


def index_record_modification(sender, changes):
    """Sync every committed change of a model using the Algolia mixin."""
    for obj, change in changes:
        if isinstance(obj, AlgoliaModelMixin) and change in CHANGE_EVENTS:
            current_algolia_indexer.handle(obj, CHANGE_EVENTS[change])
