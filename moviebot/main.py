"""Application entry point.

Main module that initializes and runs the Telegram bot application. Handles
both webhook mode (for production deployment on Railway) and polling mode
(for local development). Configures logging, wires components through the
DI container and registers bot handlers.
"""

import logging

from telegram.ext import Application, CallbackQueryHandler, CommandHandler

from .bot.handlers import CATALOG_ORCHESTRATOR_KEY, error_handler, handle_callback, start
from .config import config
from .core.container import Container

# Logging
logging.basicConfig(
    format="%(asctime)s - %(levelname)s - %(message)s",
    level=getattr(logging, config.bot.log_level.upper(), logging.INFO),
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def build_application(container: Container) -> Application:
    """Create the Telegram application with handlers and shared resources.

    Args:
        container: DI container providing the catalog components.

    Returns:
        Configured application ready to run.
    """
    tmdb_client = container.tmdb_client()

    async def post_init(application: Application) -> None:
        application.bot_data[CATALOG_ORCHESTRATOR_KEY] = container.catalog_orchestrator()
        logger.info("Catalog orchestrator initialized")

    async def post_shutdown(application: Application) -> None:
        try:
            await tmdb_client.close()
            logger.info("TMDB session closed")
        except Exception as e:
            logger.warning(f"Error during cleanup: {e}")

    app = (
        Application.builder()
        .token(config.bot.bot_token)
        .concurrent_updates(True)
        .read_timeout(config.bot.timeout)
        .write_timeout(config.bot.timeout)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )

    # Add handlers
    app.add_handler(CommandHandler("start", start))
    app.add_handler(CallbackQueryHandler(handle_callback))
    app.add_error_handler(error_handler)

    return app


def main() -> None:
    """Main application entry point.

    Initializes the Telegram bot application with proper configuration,
    registers command and callback handlers, and starts the bot in either
    webhook mode (production) or polling mode (development).
    """
    container = Container()
    app = build_application(container)

    # Run in webhook or polling mode
    if config.bot.use_webhook:
        path = f"/{config.bot.bot_token}"
        webhook_url = f"https://{config.bot.webhook_domain}{path}"
        logger.info(f"Starting webhook at https://{config.bot.webhook_domain}/<token>")

        app.run_webhook(
            listen=config.bot.listen_host,
            port=config.bot.port,
            url_path=path,
            webhook_url=webhook_url,
        )
    else:
        logger.warning("No public domain found; falling back to long-polling")
        app.run_polling()


if __name__ == "__main__":
    main()
