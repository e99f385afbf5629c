"""Petboard - a small pet registry backed by MongoDB.

Exposes a JSON API for listing and creating pets and a server-rendered page
with a submission form.
"""

__version__ = "0.1.0"
