"""Utilities module."""

from .file_utils import FileUtils
