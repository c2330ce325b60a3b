"""Telegram bot message templates and constants.

Contains all user-facing message templates and button labels. Centralizes
message management for consistent user experience across bot features.
"""

# Menus
START_MESSAGE = "🎬 Welcome! What do you want to explore?"
CHOOSE_CATEGORY_MESSAGE = "Choose category:"

# Button labels
BUTTON_MOVIES = "🎥 Movies"
BUTTON_SONGS = "🎵 Songs"
BUTTON_VIDEOS = "📹 Videos"
BUTTON_BOLLYWOOD = "🎬 Bollywood"
BUTTON_HOLLYWOOD = "🎬 Hollywood"

# Placeholder sections
SONGS_COMING_SOON = "🎵 Songs feature coming soon…"
VIDEOS_COMING_SOON = "📹 Videos feature coming soon…"

# Catalog results
NO_RESULTS_MESSAGE = "No {category} results found."

# Error messages
ERROR_LOAD_POSTERS = "⚠️ Could not load posters. Check TMDB key and network."
UNKNOWN_ACTION_ALERT = "Unknown option, please use /start to open the menu again."
