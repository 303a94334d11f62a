# -*- coding: utf-8 -*-
"""krakn: switch between git hosting identities."""

__version__ = "0.3.0"
