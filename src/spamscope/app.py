# =============================================================================
# SpamScope Main Application
# =============================================================================
# This is the main Textual application class. It wires the pieces together:
#
#   Config -> ClassifierClient -> AnalysisRequestManager ---+
#                                 ResultActions ------------+-> AnalysisController
#                                                                    |
#                                                              AnalyzerScreen
#
# The app manages:
#   - Configuration loading
#   - Building the analysis pipeline
#   - Global keybindings
# =============================================================================

import argparse
import logging
import sys

from textual.app import App
from textual.binding import Binding

from spamscope import __version__, __app_name__
from spamscope.analysis import AnalysisController, AnalysisRequestManager, ResultActions
from spamscope.client import ClassifierClient
from spamscope.config import Config, ConfigError, print_paths
from spamscope.ui.screens.analyzer import AnalyzerScreen

logger = logging.getLogger(__name__)


class SpamScopeApp(App):
    """
    The main SpamScope application.

    Attributes:
        config: The loaded application configuration.
        client: HTTP client for the classifier service.
        controller: Orchestrates input, requests and result actions.
    """

    # Application metadata
    TITLE = "SpamScope"
    SUB_TITLE = "Spam detection with machine learning"

    # Global keybindings - these work from any screen
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("f1", "show_help", "Help"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        *,
        client: ClassifierClient | None = None,
    ) -> None:
        """
        Initialize the SpamScope application.

        Args:
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from the default location.
            client: Optional classifier client (mainly for tests). Built from
                    the configuration if not provided.
        """
        super().__init__()

        # Initialize config error tracking
        self._config_error: str | None = None

        # Load configuration if not provided
        if config is None:
            try:
                config = Config.load()
            except ConfigError as e:
                config = Config()
                self._config_error = str(e)
        self.config = config

        self.client = client or ClassifierClient(
            config.api.base_url,
            timeout=config.api.request_timeout,
        )
        self.controller = AnalysisController(
            AnalysisRequestManager(self.client),
            ResultActions(self.copy_to_clipboard, config.export.path),
        )

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        logger.info(f"Using classifier at {self.client.base_url}")

        # Check for config errors
        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        await self.push_screen(AnalyzerScreen(self.controller))

    def on_unmount(self) -> None:
        """Release HTTP connections on exit."""
        self.client.close()

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_show_help(self) -> None:
        """Show the keybinding summary."""
        self.notify(
            "F2/F3=text/file mode, F5=analyze, Ctrl+O=open file, "
            "F6=copy summary, F7=export, Ctrl+Q=quit",
            timeout=10,
        )


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="SpamScope: a terminal front-end for a spam classifier",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--api-url",
        metavar="URL",
        help="Classifier base URL for this run (overrides config and $SPAMSCOPE_API_URL)",
    )

    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Write the effective configuration to the config file and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging to the state directory",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool) -> None:
    """
    Configure logging.

    The terminal belongs to the TUI, so debug output goes to a log file.
    Without --debug nothing is written anywhere: a handler bound to stderr
    would draw over the running screen.
    """
    if not debug:
        logging.getLogger(__app_name__).addHandler(logging.NullHandler())
        return

    log_path = Config.log_file_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_path,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for SpamScope.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version, --write-config)
        3. Loads configuration
        4. Starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    setup_logging(args.debug)

    try:
        config = Config.load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.api_url:
        config.api.base_url = args.api_url

    if args.write_config:
        path = config.save()
        print(f"Configuration written to {path}")
        return 0

    # Create and run the application
    app = SpamScopeApp(config=config)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
