"""Telegram bot handlers.

Handles the /start command and inline keyboard callbacks. Catalog
categories delegate to the catalog orchestrator and the album delivery
layer; every failure is logged here and turned into one user-visible
notice, so no error escapes an interaction.
"""

import logging

from telegram import Update
from telegram.constants import ChatAction
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from ..exceptions import (
    ConfigError,
    DeliveryError,
    EmptyResultError,
    UnknownActionError,
    UpstreamError,
)
from .actions import Action, parse_action
from .catalog_orchestrator import CatalogOrchestrator
from .delivery import send_albums
from .keyboards import movies_menu_markup, root_menu_markup
from .messages import (
    CHOOSE_CATEGORY_MESSAGE,
    ERROR_LOAD_POSTERS,
    NO_RESULTS_MESSAGE,
    SONGS_COMING_SOON,
    START_MESSAGE,
    UNKNOWN_ACTION_ALERT,
    VIDEOS_COMING_SOON,
)

logger = logging.getLogger(__name__)

# Key of the catalog orchestrator in Application.bot_data
CATALOG_ORCHESTRATOR_KEY = "catalog_orchestrator"

PLACEHOLDER_REPLIES = {
    Action.SONGS: SONGS_COMING_SOON,
    Action.VIDEOS: VIDEOS_COMING_SOON,
}


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command.

    Sends the welcome message with the top-level menu.

    Args:
        update: Telegram update object containing message data.
        context: Bot context for accessing application instance.
    """
    if update.message:
        await update.message.reply_text(START_MESSAGE, reply_markup=root_menu_markup())


async def handle_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle inline keyboard selections.

    The callback data alone decides what happens next: menu navigation,
    a placeholder notice or a catalog lookup sent as photo albums.

    Args:
        update: Telegram update object containing the callback query.
        context: Bot context for accessing application instance.
    """
    query = update.callback_query
    if query is None:
        return

    try:
        action = parse_action(query.data)
    except UnknownActionError as e:
        user_id = update.effective_user.id if update.effective_user else None
        logger.warning("Ignoring callback from user %s: %s", user_id, e)
        await query.answer(UNKNOWN_ACTION_ALERT, show_alert=True)
        return

    await query.answer()

    chat = update.effective_chat
    if chat is None:
        return

    if action is Action.ROOT:
        await context.bot.send_message(chat.id, START_MESSAGE, reply_markup=root_menu_markup())
    elif action is Action.MOVIES:
        await context.bot.send_message(
            chat.id, CHOOSE_CATEGORY_MESSAGE, reply_markup=movies_menu_markup()
        )
    elif action in PLACEHOLDER_REPLIES:
        await context.bot.send_message(chat.id, PLACEHOLDER_REPLIES[action])
    elif action.is_catalog_category:
        await send_catalog(context, chat.id, action)


async def send_catalog(
    context: ContextTypes.DEFAULT_TYPE, chat_id: int, action: Action
) -> None:
    """Fetch a catalog category and send it as photo albums.

    Args:
        context: Bot context holding the catalog orchestrator in bot_data.
        chat_id: Chat to deliver albums to.
        action: Catalog category action.
    """
    orchestrator: CatalogOrchestrator = context.bot_data[CATALOG_ORCHESTRATOR_KEY]

    try:
        await context.bot.send_chat_action(chat_id=chat_id, action=ChatAction.UPLOAD_PHOTO)
        albums = await orchestrator.fetch_albums(action.value)
        sent = await send_albums(context.bot, chat_id, albums)
        logger.info("Delivered %d albums for %s to chat %s", sent, action, chat_id)
        return
    except EmptyResultError:
        await context.bot.send_message(chat_id, NO_RESULTS_MESSAGE.format(category=action.label))
        return
    except ConfigError as e:
        logger.error("Catalog misconfigured for %s: %s", action, e)
    except UpstreamError as e:
        logger.error("TMDB error for %s: %s, payload: %r", action, e, e.payload)
    except DeliveryError as e:
        logger.error("Album delivery failed for %s (batch %s): %s", action, e.batch_index, e)
    except TelegramError as e:
        logger.error("Telegram error while preparing %s for chat %s: %s", action, chat_id, e)

    await _notify_failure(context, chat_id)


async def _notify_failure(context: ContextTypes.DEFAULT_TYPE, chat_id: int) -> None:
    """Tell the user that posters could not be loaded."""
    try:
        await context.bot.send_message(chat_id, ERROR_LOAD_POSTERS)
    except TelegramError as e:
        logger.error(f"Failed to send error notice to chat {chat_id}: {e}")


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors that escaped the handlers above.

    Args:
        update: Update being processed, may be None.
        context: Bot context carrying the raised error.
    """
    logger.error("Unhandled error while processing update %s", update, exc_info=context.error)
