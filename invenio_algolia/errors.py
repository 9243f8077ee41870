# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Invenio Algolia errors."""


class AlgoliaError(Exception):
    """Base class for errors raised by Invenio-Algolia."""


class AssociationAlreadyRegisteredError(AlgoliaError):
    """Raised when a model is registered twice against the same index."""


class RegistryFrozenError(AlgoliaError):
    """Raised when registering an association after application bootstrap."""
