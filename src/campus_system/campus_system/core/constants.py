"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

BIRTHDAY_SUBJECT = "Happy Campus Birthday!"
BIRTHDAY_SEPARATOR = "--------"

DEFAULT_SMTP_PORT = 25
DEFAULT_SMTP_TIMEOUT_SECONDS = 10
DEFAULT_MYSQL_PORT = 3306
