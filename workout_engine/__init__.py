"""
Workout Engine
==============

Workout generation and strength analytics for the training app.

Components:
- Generation: exercise filter, selector, prescription, namer, AI adapter
  and the fallback strategy chain that ties them together
- Analytics: strength standards, streaks, workout calendar, muscle scores
- Repository: read-only record access (Firestore or in-memory)
"""

__version__ = "0.1.0"
