"""Binary IO utilities for map file parsing."""

from keroedit.io.reader import Reader
from keroedit.io.writer import Writer

__all__ = ['Reader', 'Writer']
