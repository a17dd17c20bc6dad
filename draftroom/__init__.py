"""
draftroom - player evaluation and draft decision engine.

Scores players at every positional role, classifies archetypes,
age-adjusts and ranks the player pool, builds roster views from draft
picks and recommends players for upcoming picks.
"""

__version__ = "0.1.0"
