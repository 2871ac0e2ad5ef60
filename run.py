# run.py
"""
Main application entry point.
"""

import sys

from storefront import create_app
from storefront.core.container import container
from storefront.core.interfaces import IConfigProvider, ILogger


class FlaskServerService:
    """
    Flask server wrapped as a service.
    """

    def __init__(self, app, config: IConfigProvider, logger: ILogger):
        self.app = app
        self.config = config
        self.logger = logger

    def start_server(self) -> None:
        """Start Flask server"""
        port = self.config.get("PORT")

        if self.config.is_production():
            self.logger.info(f"Starting server in production mode on port {port}")
            from waitress import serve

            serve(self.app, host="0.0.0.0", port=port)
        else:
            self.logger.info(f"Starting server in development mode on port {port}")
            self.app.run(
                host="0.0.0.0",
                port=port,
                debug=True,
                use_reloader=False,
            )


def main() -> None:
    """Main entry point"""
    try:
        app = create_app()
        server = FlaskServerService(
            app, container.resolve(IConfigProvider), container.resolve(ILogger)
        )
        server.start_server()

    except Exception as e:
        logger = container.try_resolve(ILogger)
        if logger:
            logger.critical(f"Application startup failed: {e}")
        else:
            print(f"CRITICAL: Application startup failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
