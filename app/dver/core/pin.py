"""global.json pin document I/O.

The pin document tells the dotnet host which SDK version to use for a
directory tree:

    {
      "sdk": {
        "version": "9.0.100"
      }
    }
"""

import contextlib
import json
import logging
import shutil
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from dver.core.paths import get_pin_backup_path, get_pin_path

logger = logging.getLogger(__name__)


class SdkPin(BaseModel):
    """The "sdk" object of global.json."""

    version: str


class PinDocument(BaseModel):
    """A global.json document. Extra keys written by other tools are kept."""

    model_config = ConfigDict(extra="allow")

    sdk: SdkPin


class PinError(Exception):
    """Raised when global.json cannot be read or written."""


def write_pin(version: str, cwd: Path) -> Path:
    """Pin an SDK version in cwd/global.json.

    An existing global.json is first copied to global.json.bak. A failed
    backup does not prevent the write. The version is stored verbatim.

    Args:
        version: SDK version to pin.
        cwd: Directory that receives global.json.

    Returns:
        Path of the written global.json.

    Raises:
        PinError: If the version is empty or the file cannot be written.
    """
    if not version:
        msg = "SDK version cannot be empty"
        raise PinError(msg)

    pin_path = get_pin_path(cwd)

    if pin_path.exists():
        backup_path = get_pin_backup_path(cwd)
        with contextlib.suppress(OSError):
            shutil.copyfile(pin_path, backup_path)
            logger.debug("Backed up %s to %s", pin_path, backup_path)

    document = PinDocument(sdk=SdkPin(version=version))
    try:
        text = json.dumps(document.model_dump(), indent=2, ensure_ascii=False)
        pin_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise PinError(f"Failed to write {pin_path}: {e}") from e

    return pin_path


def read_pin(cwd: Path) -> PinDocument | None:
    """Read cwd/global.json if present.

    Args:
        cwd: Directory to look in.

    Returns:
        PinDocument, or None when no global.json exists.

    Raises:
        PinError: If the file is unreadable, not JSON, or has no sdk.version.
    """
    pin_path = get_pin_path(cwd)
    if not pin_path.exists():
        return None

    try:
        data = json.loads(pin_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise PinError(f"Failed to read {pin_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PinError(f"Invalid JSON in {pin_path}: {e}") from e

    try:
        return PinDocument.model_validate(data)
    except ValidationError as e:
        raise PinError(f"Invalid pin document in {pin_path}: {e}") from e
