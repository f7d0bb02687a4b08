"""LogManager - date-based file and folder filtering with 7-Zip discovery."""

from logmanager.utils.constants import VERSION

__version__ = VERSION
