"""Album delivery to Telegram chats.

Sends each album batch as one media group. Batches are sent strictly one
after another; when a send fails the remaining batches are dropped and the
failure is reported as DeliveryError.
"""

import logging
from collections.abc import Iterable

from telegram import Bot, InputMediaPhoto
from telegram.constants import ParseMode
from telegram.error import TelegramError

from ..exceptions import DeliveryError
from ..models import AlbumBatch

logger = logging.getLogger(__name__)


def build_media_group(batch: AlbumBatch) -> list[InputMediaPhoto]:
    """Convert an album batch to Telegram photo inputs.

    Some clients only show the caption of the first photo in an album;
    captions are still attached to every photo.

    Args:
        batch: Entries for one album.

    Returns:
        One InputMediaPhoto per entry, in batch order.
    """
    return [
        InputMediaPhoto(media=entry.poster_url, caption=entry.caption, parse_mode=ParseMode.HTML)
        for entry in batch
    ]


async def send_albums(bot: Bot, chat_id: int, batches: Iterable[AlbumBatch]) -> int:
    """Send album batches to a chat.

    Args:
        bot: Telegram bot used for sending.
        chat_id: Target chat.
        batches: Album batches in delivery order.

    Returns:
        Number of albums sent.

    Raises:
        DeliveryError: If Telegram rejects a media group or the request fails.
    """
    sent = 0
    for index, batch in enumerate(batches):
        media = build_media_group(batch)
        try:
            await bot.send_media_group(chat_id=chat_id, media=media)
        except TelegramError as e:
            raise DeliveryError(
                f"Failed to send album {index + 1} to chat {chat_id}: {e}", batch_index=index
            ) from e
        sent += 1
        logger.debug("Sent album %d with %d photos to chat %s", index + 1, len(batch), chat_id)

    return sent
