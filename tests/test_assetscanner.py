from pathlib import Path

import pytest

from src.assetscanner.api import FolderNotFoundError, NoImagesFoundError, scan
from src.config.api import ConversionConfig


def test_scan_orders_case_insensitive(tmp_path: Path):
    for name in ("B.png", "a.png", "C.PNG"):
        (tmp_path / name).write_bytes(b"x")

    assets = scan(str(tmp_path))
    assert [a.name for a in assets] == ["a.png", "B.png", "C.PNG"]
    assert all(Path(a.path).is_absolute() for a in assets)


def test_scan_filters_extensions(tmp_path: Path):
    for name in ("1.jpg", "2.JPEG", "3.tif", "4.tiff", "5.bmp", "6.webp", "7.gif", "notes.txt", "images.pdf", "noext"):
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "sub.png").mkdir()

    assets = scan(str(tmp_path))
    assert [a.name for a in assets] == ["1.jpg", "2.JPEG", "3.tif", "4.tiff", "5.bmp", "6.webp"]


def test_scan_does_not_recurse(tmp_path: Path):
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "a.png").write_bytes(b"x")
    (tmp_path / "b.png").write_bytes(b"x")

    assert [a.name for a in scan(str(tmp_path))] == ["b.png"]


def test_scan_missing_folder(tmp_path: Path):
    with pytest.raises(FolderNotFoundError):
        scan(str(tmp_path / "missing"))


def test_scan_file_is_not_a_folder(tmp_path: Path):
    f = tmp_path / "a.png"
    f.write_bytes(b"x")
    with pytest.raises(FolderNotFoundError):
        scan(str(f))


def test_scan_empty_path():
    with pytest.raises(FolderNotFoundError):
        scan("")


def test_scan_no_images(tmp_path: Path):
    (tmp_path / "readme.md").write_text("hi", encoding="utf-8")
    with pytest.raises(NoImagesFoundError):
        scan(str(tmp_path))


def test_scan_uses_config_extensions(tmp_path: Path):
    (tmp_path / "a.png").write_bytes(b"x")
    (tmp_path / "b.gif").write_bytes(b"x")

    assets = scan(str(tmp_path), ConversionConfig(extensions=("gif",)))
    assert [a.name for a in assets] == ["b.gif"]


def test_scan_case_only_differences_ordered_by_exact_name(tmp_path: Path):
    (tmp_path / "a.png").write_bytes(b"x")
    if (tmp_path / "A.png").exists():
        pytest.skip("case-insensitive filesystem")
    for name in ("b.png", "A.png"):
        (tmp_path / name).write_bytes(b"x")

    assert [a.name for a in scan(str(tmp_path))] == ["A.png", "a.png", "b.png"]
