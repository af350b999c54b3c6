"""Screenshot baselines and pixel comparison.

The first run of a snapshot (or any run with updating enabled) stores the
screenshot as the baseline. Later runs count differing pixels against it and
fail when the count exceeds the allowance, leaving the actual and diff
images beside the baseline.
"""

from __future__ import annotations

import io
import re
from pathlib import Path

import structlog
from PIL import Image, ImageChops

from swaglabs.core.exceptions import SnapshotMismatchError, ValidationError

logger = structlog.get_logger()

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


def diff_pixel_count(expected: Image.Image, actual: Image.Image) -> int:
    """Number of pixels that differ in any channel.

    Images of different sizes are compared as wholly different, using the
    larger of the two areas.
    """
    if expected.size != actual.size:
        return max(expected.width * expected.height, actual.width * actual.height)

    diff = ImageChops.difference(expected.convert("RGB"), actual.convert("RGB"))
    # A pixel counts once if any channel differs, however slightly
    bands = [band.point(lambda value: 255 if value else 0) for band in diff.split()]
    mask = bands[0]
    for band in bands[1:]:
        mask = ImageChops.lighter(mask, band)
    return mask.histogram()[255]


class SnapshotComparator:
    """Compares PNG screenshots against named baselines in one directory."""

    def __init__(
        self,
        snapshot_dir: Path | str,
        update: bool = False,
        max_diff_pixels: int = 0,
    ) -> None:
        self.snapshot_dir = Path(snapshot_dir)
        self.update = update
        self.max_diff_pixels = max_diff_pixels

    def baseline_path(self, name: str) -> Path:
        if not _NAME_PATTERN.match(name):
            raise ValidationError(f"Invalid snapshot name {name!r}")
        if not name.endswith(".png"):
            name = f"{name}.png"
        return self.snapshot_dir / name

    def compare(self, actual_png: bytes, name: str, max_diff_pixels: int | None = None) -> int:
        """Check a screenshot against its baseline.

        Returns:
            The number of differing pixels (0 when a baseline was written).

        Raises:
            SnapshotMismatchError: If more pixels differ than allowed.
        """
        allowed = self.max_diff_pixels if max_diff_pixels is None else max_diff_pixels
        baseline = self.baseline_path(name)

        if self.update or not baseline.exists():
            baseline.parent.mkdir(parents=True, exist_ok=True)
            baseline.write_bytes(actual_png)
            logger.info("snapshot_baseline_written", snapshot=baseline.name)
            return 0

        with Image.open(baseline) as expected_image, Image.open(io.BytesIO(actual_png)) as actual_image:
            differing = diff_pixel_count(expected_image, actual_image)
            if differing > allowed:
                actual_image.save(baseline.with_suffix(".actual.png"))
                if expected_image.size == actual_image.size:
                    ImageChops.difference(
                        expected_image.convert("RGB"), actual_image.convert("RGB")
                    ).save(baseline.with_suffix(".diff.png"))
                logger.warning(
                    "snapshot_mismatch", snapshot=baseline.name, allowed=allowed, actual=differing
                )
                raise SnapshotMismatchError(baseline.name, allowed, differing)

        logger.debug("snapshot_matched", snapshot=baseline.name, differing=differing)
        return differing
