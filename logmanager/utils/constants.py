"""Constants for LogManager."""

# Version
VERSION = "1.2.0"

# Default glob pattern for file and folder matching
DEFAULT_PATTERN = "*"

# 7-Zip executable names
SEVENZIP_WINDOWS_BINARY = "7z.exe"
SEVENZIP_UNIX_BINARIES = ["7z", "7za", "7zr"]

# Well-known install locations
SEVENZIP_WINDOWS_PATHS = [
    r"C:\Program Files\7-Zip\7z.exe",
    r"C:\Program Files (x86)\7-Zip\7z.exe",
]

SEVENZIP_UNIX_PATHS = [
    "/usr/bin/7z",
    "/usr/bin/7za",
    "/usr/bin/7zr",
    "/usr/local/bin/7z",
    "/usr/local/bin/7za",
    "/usr/local/bin/7zr",
    "/opt/7-zip/7z",
    "/opt/7-zip/7za",
]

WHICH_COMMAND = "/usr/bin/which"

# "i" prints 7-Zip's supported formats and codecs
SEVENZIP_INFO_ARGUMENT = "i"

# Subprocess timeouts (seconds)
WHICH_TIMEOUT_SECONDS = 1.0
VERIFY_TIMEOUT_SECONDS = 2.0

# CLI exit codes
EXIT_CONFIG_ERROR = 2
EXIT_DIRECTORY_NOT_FOUND = 3
EXIT_INVALID_DATE_RANGE = 4
EXIT_DIRECTORY_ACCESS_DENIED = 5
EXIT_SEVENZIP_NOT_FOUND = 6
EXIT_SEVENZIP_VERIFICATION_FAILED = 7
