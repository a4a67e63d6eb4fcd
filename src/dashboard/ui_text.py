# Copy blocks for headings, status banners and empty states shown by the dashboard.

from __future__ import annotations

APP_SUBTITLE = "Browse characters, their origins and the episodes they appear in."

EMPTY_CHARACTER = "Pick a character id or press the randomizer to load one."
EMPTY_SEARCH = "No characters match the current filters."
SERVER_WARNING = "The API answered with data we could not read. Some views may be incomplete."
SERVER_OFFLINE = "The Rick and Morty API is unreachable right now."
