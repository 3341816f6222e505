"""Moz SEO Analytics client.

Async JSON-RPC client for the Moz API with a competitor analysis engine
that aggregates site, keyword and ranking data into a single report.
"""

__version__ = "1.0.0"
