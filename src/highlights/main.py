"""
Import a Kindle highlights export into a vault note.

Reads the exported HTML file, extracts metadata and highlights, writes the
rendered note under the configured destination folder and tells the user how
it went.
"""

from datetime import date
from pathlib import Path

from rich.markup import escape

from common.env import env
from common.logger import error, get_logger, progress, success

from .errors import (
    DestinationFileExists,
    DestinationFolderInvalid,
    DocumentWriteError,
    ExportReadError,
    ParseError,
)
from .extraction import extract
from .models import ImportResult
from .writer import write_document

logger = get_logger(__name__)

MSG_CREATED = "Archivo creado correctamente"
MSG_INVALID_PATH = "Ruta inválida. Selecciona una carpeta válida en la configuración"
MSG_FILE_EXISTS = "El archivo ya existe"
MSG_WRITE_FAILED = "No se pudo escribir el archivo: {reason}"
MSG_PARSE_FAILED = "No se pudo leer el archivo HTML: {reason}"
MSG_READ_FAILED = "No se pudo abrir el archivo: {reason}"


def read_export(html_path: Path) -> bytes:
    """
    Read the whole export into memory.

    Raises:
        ExportReadError: If the file cannot be read
    """
    logger.debug(f"Reading {html_path}...")
    try:
        return html_path.read_bytes()
    except OSError as e:
        raise ExportReadError(f"{html_path}: {e.strerror or e}") from e


def build_import(
    html_path: Path,
    destination_folder: str | None = None,
    current_date: date | None = None,
    parser: str | None = None,
) -> ImportResult:
    """
    Read and extract an export without writing anything.

    Args:
        html_path: Exported HTML file
        destination_folder: Vault folder (default: KINDLE_HIGHLIGHTS_PATH or '/')
        current_date: Import date (default: today)
        parser: BeautifulSoup feature name (default: HTML_PARSER or html.parser)

    Returns:
        The finished import

    Raises:
        ExportReadError: If the export cannot be read
        ParseError: If the export cannot be parsed
    """
    if destination_folder is None:
        destination_folder = env.destination_folder()
    if current_date is None:
        current_date = date.today()
    if parser is None:
        parser = env.html_parser()

    progress(f"Importing highlights from {escape(html_path.name)}...")
    try:
        raw_html = read_export(html_path)
    except ExportReadError as e:
        error(MSG_READ_FAILED.format(reason=escape(str(e))))
        raise

    try:
        return extract(raw_html, destination_folder, current_date, parser=parser)
    except ParseError as e:
        error(MSG_PARSE_FAILED.format(reason=escape(str(e))))
        raise


def import_highlights(
    html_path: Path,
    destination_folder: str | None = None,
    vault_dir: Path | None = None,
    current_date: date | None = None,
    parser: str | None = None,
) -> ImportResult:
    """
    Import an export and write the note into the vault.

    Args:
        html_path: Exported HTML file
        destination_folder: Vault folder (default: KINDLE_HIGHLIGHTS_PATH or '/')
        vault_dir: Vault root directory (default: VAULT_DIR or '.')
        current_date: Import date (default: today)
        parser: BeautifulSoup feature name (default: HTML_PARSER or html.parser)

    Returns:
        The import that was written

    Raises:
        ParseError: If the export cannot be parsed
        DocumentWriteError: If the note cannot be created (see subclasses)
    """
    if vault_dir is None:
        vault_dir = env.vault_dir()

    result = build_import(
        html_path,
        destination_folder=destination_folder,
        current_date=current_date,
        parser=parser,
    )

    try:
        target = write_document(result, vault_dir)
    except DestinationFolderInvalid:
        error(MSG_INVALID_PATH)
        raise
    except DestinationFileExists:
        error(MSG_FILE_EXISTS)
        raise
    except DocumentWriteError as e:
        error(MSG_WRITE_FAILED.format(reason=escape(e.reason)))
        raise

    logger.info(
        f"Wrote [bold]{result.highlight_count}[/bold] highlight(s) to {escape(str(target))}"
    )
    success(MSG_CREATED)
    return result
