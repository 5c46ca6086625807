"""
Support Tools — small utilities for support engineers.

An in-memory incident tracker with Markdown reports, a log scanner for
origin errors and cache ratios, and an async parallel API health checker,
all reachable through the `support-cli` command.
"""

__version__ = "1.0.0"
