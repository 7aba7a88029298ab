from __future__ import annotations

import io
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import fitz  # PyMuPDF
from PIL import Image

from src.assetscanner.model import ImageAsset
from src.config.model import POINTS_PER_INCH
from src.pagegeometry.model import PageSize
from src.pagegeometry.pagegeometry import PageGeometry
from .model import ComposeResult, DecodedImage

logger = logging.getLogger(__name__)

# formats MuPDF embeds directly; everything else is re-encoded losslessly as PNG
EMBED_AS_IS = {"JPEG", "PNG"}
PNG_MODES = {"1", "L", "LA", "P", "RGB", "RGBA"}

ProgressCallback = Callable[[int], None]


class ImageLoadFailure(RuntimeError):
    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"Failed to load image: {path}")
        self.path = path
        self.reason = reason


class WriterInitFailure(RuntimeError):
    def __init__(self, path: str, reason: str = "") -> None:
        msg = "Failed to initialize PDF writer."
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path
        self.reason = reason


class OutputWriteFailure(RuntimeError):
    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"Failed to write PDF: {path} ({reason})")
        self.path = path
        self.reason = reason


def progress_percent(done: int, total: int) -> int:
    """round(done * 100 / total), halves rounded up, integer arithmetic only."""
    return (done * 200 + total) // (2 * total)


def _output_mode(out: Path) -> int:
    """Mode of the file being replaced, else the default for a new file under the umask."""
    if out.exists():
        return stat.S_IMODE(out.stat().st_mode)
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class _PdfWriter:
    """One output document. Pages go to memory, the file is written once on finalize."""

    def __init__(self, output_path: str, first_page: PageSize) -> None:
        self.output_path = output_path
        out = Path(output_path)
        if out.is_dir():
            raise WriterInitFailure(output_path, "target is a directory")

        try:
            self.mode = _output_mode(out)
            fd, tmp = tempfile.mkstemp(prefix=f".{out.name}.", suffix=".part", dir=str(out.parent))
            os.close(fd)
        except OSError as e:
            raise WriterInitFailure(output_path, str(e)) from e
        self.tmp_path = tmp

        self.doc = None
        try:
            self.doc = fitz.open()
            self.page = self._add_page(first_page)
        except (RuntimeError, ValueError) as e:
            if self.doc is not None:
                self.doc.close()
            Path(tmp).unlink(missing_ok=True)
            raise WriterInitFailure(output_path, str(e)) from e

    def new_page(self, size: PageSize) -> None:
        self.page = self._add_page(size)

    def draw(self, image: DecodedImage) -> None:
        try:
            self.page.insert_image(self.page.rect, stream=image.data, keep_proportion=False)
        except (RuntimeError, ValueError) as e:
            raise ImageLoadFailure(image.path, str(e)) from e

    def finalize(self) -> None:
        try:
            self.doc.save(self.tmp_path, deflate=True)
            self.doc.close()
            os.chmod(self.tmp_path, self.mode)
            os.replace(self.tmp_path, self.output_path)
        except (RuntimeError, ValueError, OSError) as e:
            raise OutputWriteFailure(self.output_path, str(e)) from e

    def discard(self) -> None:
        if not self.doc.is_closed:
            self.doc.close()
        try:
            Path(self.tmp_path).unlink(missing_ok=True)
        except OSError as e:
            logger.warning("could not remove temporary file %s: %s", self.tmp_path, e)

    def _add_page(self, size: PageSize) -> "fitz.Page":
        return self.doc.new_page(width=size.width, height=size.height)


class DocumentComposer:
    def __init__(self, dpi: int, points_per_inch: float = POINTS_PER_INCH) -> None:
        self.geometry = PageGeometry(dpi, points_per_inch)

    def compose(
        self,
        assets: Sequence[ImageAsset],
        output_path: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ComposeResult:
        if not assets:
            raise ValueError("compose needs at least one image")

        total = len(assets)
        first = self.decode(assets[0])
        first_size = self.geometry.page_size_for(first.width, first.height)
        writer = _PdfWriter(output_path, first_size)

        sizes: List[PageSize] = []
        try:
            for index, asset in enumerate(assets):
                if index == 0:
                    image, size = first, first_size
                else:
                    image = self.decode(asset)
                    size = self.geometry.page_size_for(image.width, image.height)
                    writer.new_page(size)

                writer.draw(image)
                sizes.append(size)
                logger.debug(
                    "page %d/%d: %s %dx%d px -> %.2fx%.2f pt",
                    index + 1, total, asset.name, image.width, image.height, size.width, size.height,
                )

                if on_progress is not None:
                    on_progress(progress_percent(index + 1, total))

            writer.finalize()
        except BaseException:
            writer.discard()
            raise

        return ComposeResult(output_path=output_path, page_sizes=sizes)

    def decode(self, asset: ImageAsset) -> DecodedImage:
        try:
            with Image.open(asset.path) as im:
                im.load()
                width, height = im.size
                fmt = im.format or ""
                if fmt in EMBED_AS_IS:
                    data = Path(asset.path).read_bytes()
                else:
                    data = self._encode_png(im)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise ImageLoadFailure(asset.path, str(e)) from e

        if width <= 0 or height <= 0:
            raise ImageLoadFailure(asset.path, "empty image")
        return DecodedImage(path=asset.path, width=width, height=height, image_format=fmt, data=data)

    def _encode_png(self, im: Image.Image) -> bytes:
        if im.mode not in PNG_MODES:
            im = im.convert("RGBA" if "A" in im.getbands() else "RGB")
        buf = io.BytesIO()
        im.save(buf, format="PNG")
        return buf.getvalue()
