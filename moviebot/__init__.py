"""Movie Catalog Bot Application Package.

A Telegram bot that lets users browse popular movies by category through
inline buttons. Movies are fetched from the TMDB discover API and sent back
as photo albums with formatted captions.

The application follows a modular architecture with separate concerns for:
- Bot handlers, menus and album delivery
- TMDB catalog access
- Result shaping and album batching
"""
