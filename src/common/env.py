"""Environment configuration interface for kindle-highlights.

All environment variable access goes through this module. Values may also
come from a .env file in the working directory.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_DESTINATION_FOLDER, DEFAULT_HTML_PARSER

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def destination_folder() -> str:
        """Get the vault folder imported notes are written to.

        Returns:
            Folder path relative to the vault root, defaults to '/' (the root)
        """
        return os.getenv("KINDLE_HIGHLIGHTS_PATH", DEFAULT_DESTINATION_FOLDER)

    @staticmethod
    def vault_dir() -> Path:
        """Get the directory the destination folder is resolved against.

        Returns:
            Vault root directory, defaults to the current directory
        """
        return Path(os.getenv("VAULT_DIR", "."))

    @staticmethod
    def html_parser() -> str:
        """Get the BeautifulSoup tree builder used for exports.

        Returns:
            Parser feature name, defaults to 'html.parser'
        """
        return os.getenv("HTML_PARSER", DEFAULT_HTML_PARSER)


# Singleton instance for convenient access
env = Environment()
