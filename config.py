import os
from dotenv import load_dotenv
load_dotenv()

TRANSLATE_ENDPOINT = os.getenv("TRANSLATE_ENDPOINT", "https://translate.googleapis.com/translate_a/single")

# Default language pair, overridable per call
DEFAULT_FROM_LANG = os.getenv("TRANSLATE_FROM_LANG", "en")
DEFAULT_TO_LANG = os.getenv("TRANSLATE_TO_LANG", "es")

# Unset means requests waits indefinitely
timeout_value = os.getenv("TRANSLATE_TIMEOUT")
REQUEST_TIMEOUT = float(timeout_value) if timeout_value else None
