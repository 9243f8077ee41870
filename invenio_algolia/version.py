# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Version information for Invenio-Algolia.

This file is imported by ``invenio_algolia.__init__``,
and parsed by ``setup.py``.
"""

__version__ = "1.0.0"
