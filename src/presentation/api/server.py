import logging
import sys

from ...infrastructure.config.settings import Settings, configure_logging

logger = logging.getLogger(__name__)

def main():
    """Run the API under uvicorn using settings from the environment"""
    try:
        settings = Settings.from_env()
        configure_logging(settings)

        from .main import create_app
        import uvicorn

        logger.info(f"Starting VPN Mock API on {settings.host}:{settings.port}")

        uvicorn.run(
            create_app(settings=settings),
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            access_log=False
        )

    except Exception as e:
        logging.error(f"Failed to start VPN Mock API: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
