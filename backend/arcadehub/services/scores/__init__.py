"""Leaderboard services: best-score upserts and per-game ranking.

Which games rank lower-is-better comes from configuration
(``SCORE_ASCENDING_GAMES``); nothing here special-cases a game name.
"""
