# src/markup_lint_cli/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving the paths the CLI needs.
    """

    @staticmethod
    def get_cli_package_root() -> Path:
        """Directory of the installed markup_lint_cli package (holds settings.json)."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_path() -> Path:
        return PathUtils.get_cli_package_root() / "settings.json"
