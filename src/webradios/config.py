"""Configuration for the webradio favorites catalog."""

import os
from pathlib import Path

# Working directory, relative to the current directory unless absolute.
# Favorites live in <WORKDIR>/<WEBRADIOS_DIRNAME>
WORKDIR = Path(os.environ.get("WEBRADIOS_WORKDIR", "data"))
WEBRADIOS_DIRNAME = "webradios"

# Playlist files
PLAYLIST_EXTENSION = ".m3u"
PLAYLIST_ENCODING = "utf-8"

# Characters replaced with "_" when turning a stream uri into a filename.
# ASCII control characters are replaced as well.
INVALID_FILENAME_CHARS = '<>/\\.:?&$!#=;*"|'
FILENAME_REPLACEMENT = "_"

# Listing defaults
DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 100

# Logging
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL = os.environ.get("WEBRADIOS_LOGLEVEL", "INFO").upper()
if LOG_LEVEL not in LOG_LEVELS:
    LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
