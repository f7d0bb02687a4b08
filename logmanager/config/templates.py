"""Config file templates written by 'logmanager config init'."""

MINIMAL_TEMPLATE = """\
# LogManager configuration
version: "1.0"

general:
  recursive: false
  pattern: "*"

files:
  date_type: created   # created | modified

output:
  format: path         # path | table | json
"""

FULL_TEMPLATE = """\
# LogManager configuration (all options)
version: "1.0"

general:
  # Search subdirectories by default
  recursive: false
  # Name pattern with * and ? wildcards, e.g. "*.log" or "2024*"
  pattern: "*"
  # Skip dot-files and (on Windows) hidden/system entries
  ignore_hidden_files: true

files:
  # Timestamp compared against the day window: created | modified
  date_type: created

output:
  # path: one path per line, table: rich table, json: JSON array
  format: path

sevenzip:
  # Checked before the built-in install locations
  extra_paths: []
  # Seconds to wait for each 'which' lookup
  which_timeout: 1.0
  # Seconds to wait for '7z i' when verifying
  verify_timeout: 2.0

logging:
  # debug | info | warning | error | critical (--verbose forces debug)
  level: warning
  color_output: true
  # Optional log file
  file_path: null
"""


def get_config_template(full: bool = False) -> str:
    """Return the full or minimal config template."""
    return FULL_TEMPLATE if full else MINIMAL_TEMPLATE
