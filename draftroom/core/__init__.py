"""Core evaluation engine: tables, scoring, archetypes, aging, roster and draft math."""
