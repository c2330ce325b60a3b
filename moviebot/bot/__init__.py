"""Telegram bot implementation package.

Contains all Telegram bot specific functionality including command and
callback handlers, inline menus, message templates and album delivery.
"""
