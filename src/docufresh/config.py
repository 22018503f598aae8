import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Logging settings
LOG_LEVEL = os.getenv("DOCUFRESH_LOG_LEVEL", "WARNING")

# Marker syntax
MARKER_OPEN = "{{"
MARKER_PATTERN = r"\{\{([^}]+)\}\}"

# DOM settings
DEFAULT_SELECTOR = os.getenv("DOCUFRESH_DEFAULT_SELECTOR", "body")

# Formatting settings (strftime patterns; None means M/D/YYYY and H:MM:SS AM)
DATE_FORMAT = os.getenv("DOCUFRESH_DATE_FORMAT") or None
TIME_FORMAT = os.getenv("DOCUFRESH_TIME_FORMAT") or None
THOUSANDS_SEPARATOR = os.getenv("DOCUFRESH_THOUSANDS_SEPARATOR", ",")
# None means "," when the thousands separator is ".", otherwise "."
DECIMAL_SEPARATOR = os.getenv("DOCUFRESH_DECIMAL_SEPARATOR") or None

MS_PER_DAY = 1000 * 60 * 60 * 24

# Remote document settings
HTTP_TIMEOUT = float(os.getenv("DOCUFRESH_HTTP_TIMEOUT", "10"))
USER_AGENT = "Mozilla/5.0 (compatible; docufresh/0.1.0)"
HTML_EXTENSIONS = ('.html', '.htm', '.xhtml')
