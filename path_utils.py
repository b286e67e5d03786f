"""
Asset path helpers that also work inside a PyInstaller bundle.
"""
import sys
from pathlib import Path


def get_base_path() -> Path:
    """
    Return the directory bundled assets are resolved against.
    A frozen PyInstaller build unpacks them under sys._MEIPASS; otherwise
    they live next to this file.
    """
    if getattr(sys, 'frozen', False):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parent


def asset_path(*parts: str) -> Path:
    """assets/ 아래 파일 경로를 만든다 (파일 존재 여부는 확인하지 않음)."""
    return get_base_path().joinpath("assets", *parts)
