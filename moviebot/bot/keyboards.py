"""Inline keyboard layouts for the bot menus."""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from .actions import Action
from .messages import (
    BUTTON_BOLLYWOOD,
    BUTTON_HOLLYWOOD,
    BUTTON_MOVIES,
    BUTTON_SONGS,
    BUTTON_VIDEOS,
)


def root_menu_markup() -> InlineKeyboardMarkup:
    """Top-level menu: Movies, Songs, Videos."""
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(BUTTON_MOVIES, callback_data=Action.MOVIES.value)],
            [InlineKeyboardButton(BUTTON_SONGS, callback_data=Action.SONGS.value)],
            [InlineKeyboardButton(BUTTON_VIDEOS, callback_data=Action.VIDEOS.value)],
        ]
    )


def movies_menu_markup() -> InlineKeyboardMarkup:
    """Movie category menu: Bollywood, Hollywood."""
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(BUTTON_BOLLYWOOD, callback_data=Action.BOLLYWOOD.value)],
            [InlineKeyboardButton(BUTTON_HOLLYWOOD, callback_data=Action.HOLLYWOOD.value)],
        ]
    )
