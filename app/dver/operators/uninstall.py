"""SDK removal operator.

Deletes SDK directories selected from the current inventory. A
directory is only deleted when it lies under an installation root,
where the roots are the parent directories of every SDK in the same
inventory. Roots are never taken from configuration or user input.
"""

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from dver.models.sdk import InstalledSdk, RemovalResult, RemovalStatus, VersionSelector

logger = logging.getLogger(__name__)


def installation_roots(inventory: Iterable[InstalledSdk]) -> list[Path]:
    """Compute the deduplicated parent directories of an inventory.

    Args:
        inventory: Every SDK currently reported, not only removal targets.

    Returns:
        Sorted list of unique parent directories.
    """
    return sorted({sdk.root for sdk in inventory})


def select_targets(
    inventory: Iterable[InstalledSdk],
    selector: VersionSelector,
) -> list[InstalledSdk]:
    """Filter the inventory by a selector, keeping inventory order."""
    return [sdk for sdk in inventory if selector.matches(sdk)]


def is_within_roots(path: Path, roots: Iterable[Path]) -> bool:
    """Check if a path equals or is beneath one of the roots.

    Both sides are normalized lexically first, so '..' components
    cannot climb out of a root.

    Args:
        path: Candidate deletion target.
        roots: Trusted installation roots.

    Returns:
        True if the path is contained by some root.
    """
    candidate = Path(os.path.normpath(path))
    return any(candidate.is_relative_to(os.path.normpath(root)) for root in roots)


class SdkRemover:
    """Removes SDK directories selected from an inventory.

    Each target is handled independently: an unsafe, missing or
    undeletable directory is reported and the batch continues.

    Example:
        >>> remover = SdkRemover(scanner.scan())
        >>> for result in remover.remove(VersionSelector.from_args("8", False)):
        ...     print(result.message)
    """

    def __init__(self, inventory: Iterable[InstalledSdk]) -> None:
        """Initialize the remover from the current inventory.

        Args:
            inventory: SDKs reported by the scanner for this run.
        """
        self._inventory = list(inventory)
        # Computed from the whole inventory before any filtering
        self._roots = installation_roots(self._inventory)

    @property
    def roots(self) -> list[Path]:
        """Trusted installation roots for this inventory."""
        return list(self._roots)

    def targets(self, selector: VersionSelector) -> list[InstalledSdk]:
        """Return the SDKs a selector would remove."""
        return select_targets(self._inventory, selector)

    def remove(self, selector: VersionSelector) -> list[RemovalResult]:
        """Remove every SDK matched by the selector.

        Args:
            selector: Which versions to remove.

        Returns:
            One RemovalResult per target, in inventory order. Empty if
            nothing matched.
        """
        targets = self.targets(selector)
        logger.info("Removing %s: %d target(s)", selector.describe(), len(targets))
        results = [self._remove_single(sdk) for sdk in targets]
        logger.info("Removed %d of %d", sum(r.removed for r in results), len(results))
        return results

    def _remove_single(self, sdk: InstalledSdk) -> RemovalResult:
        """Remove one SDK directory after the root containment check."""
        path = sdk.install_path

        if not is_within_roots(path, self._roots):
            logger.warning("Refusing to delete %s: outside SDK roots", path)
            return RemovalResult(sdk=sdk, status=RemovalStatus.SKIPPED_UNSAFE)

        if not path.exists():
            return RemovalResult(sdk=sdk, status=RemovalStatus.NOT_FOUND)

        try:
            shutil.rmtree(path)
        except OSError as e:
            logger.debug("rmtree failed for %s: %s", path, e)
            return RemovalResult(sdk=sdk, status=RemovalStatus.FAILED, error=str(e))

        logger.info("Deleted %s", path)
        return RemovalResult(sdk=sdk, status=RemovalStatus.REMOVED)
