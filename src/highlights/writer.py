"""Write rendered notes into the vault directory."""

from pathlib import Path

from common.logger import get_logger

from .errors import DestinationFileExists, DestinationFolderInvalid, DocumentWriteError
from .models import ImportResult

logger = get_logger(__name__)


def resolve_vault_path(vault_dir: Path, note_path: str) -> Path:
    """
    Resolve a vault-relative note path to a filesystem path.

    A leading '/' refers to the vault root, not the filesystem root.
    e.g., (Path('vault'), '/Books/Dune.md') -> Path('vault/Books/Dune.md')
    """
    return vault_dir / note_path.lstrip("/")


def write_document(result: ImportResult, vault_dir: Path) -> Path:
    """
    Create the note file. Never overwrites and never creates folders.

    Args:
        result: Import to write
        vault_dir: Vault root directory

    Returns:
        Path of the created file

    Raises:
        DestinationFolderInvalid: If the destination folder does not exist
        DestinationFileExists: If a note with the same name already exists
        DocumentWriteError: For any other filesystem failure
    """
    target = resolve_vault_path(vault_dir, result.path)

    try:
        with open(target, "x", encoding="utf-8") as f:
            f.write(result.document)
    except FileExistsError as e:
        raise DestinationFileExists(target, "file already exists") from e
    except (FileNotFoundError, NotADirectoryError) as e:
        raise DestinationFolderInvalid(target, "destination folder does not exist") from e
    except OSError as e:
        raise DocumentWriteError(target, e.strerror or str(e)) from e

    logger.debug(f"Wrote {len(result.document)} characters to {target}")
    return target
