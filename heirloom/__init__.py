"""heirloom - Estate inheritance distribution for a life-simulation game.

This package computes who inherits a deceased character's estate and how much
each heir receives, and persists override share distributions.

Modules:
    - domain: Pydantic data models and pure share/formatting calculators
    - application: Heir resolution, share, preview, store and valuation services
    - adapters: In-memory implementations of the host collaborators
    - core: Logging, settings and exceptions
"""

__version__ = "1.4.0"
