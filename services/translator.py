import logging
import requests

from config import TRANSLATE_ENDPOINT, DEFAULT_FROM_LANG, DEFAULT_TO_LANG, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

# The body is expected to open with [[" before the translated sentence
PREFIX_LENGTH = 3


class TranslationError(ValueError):
    """Base error for translation failures that are not transport errors."""


class MalformedResponseError(TranslationError):
    """The upstream body does not have the expected nested-array shape."""


def build_translate_url(text, from_lang=DEFAULT_FROM_LANG, to_lang=DEFAULT_TO_LANG, endpoint=TRANSLATE_ENDPOINT):
    """Build the GET URL for the public translate endpoint, with the text percent-encoded."""
    params = {
        "client": "gtx",
        "sl": from_lang,
        "tl": to_lang,
        "dt": "t",
        "q": text,
    }
    return requests.Request("GET", endpoint, params=params).prepare().url


def parse_translation(body: str) -> str:
    """Extract the translated sentence from a raw response body.

    The body looks like ``[["hola","hello",null,null],...]``. Everything
    between the three-character prefix and the first comma is taken, with
    double quotes removed. A translation containing a comma is cut short at
    that comma.
    """
    index = body.find(",")
    if index == -1:
        raise MalformedResponseError(f"No comma in translation response: {body[:100]!r}")
    if index < PREFIX_LENGTH:
        raise MalformedResponseError(f"Translation response too short: {body[:100]!r}")
    return body[PREFIX_LENGTH:index].replace('"', "")


def translate_text(text: str, from_lang: str = DEFAULT_FROM_LANG, to_lang: str = DEFAULT_TO_LANG,
                   timeout=REQUEST_TIMEOUT) -> str:
    """Translate ``text`` with a single blocking call to the translate endpoint.

    Transport errors from requests propagate unchanged. A status other than
    200 raises :class:`requests.HTTPError` and an unparseable body raises
    :class:`MalformedResponseError`.
    """
    url = build_translate_url(text, from_lang, to_lang)
    logger.info(f"Translating {len(text)} characters from {from_lang} to {to_lang}")

    response = requests.get(url, timeout=timeout)
    logger.debug(f"Translate endpoint returned status {response.status_code}")

    if response.status_code != 200:
        logger.warning(f"Translate endpoint returned status {response.status_code}")
        raise requests.HTTPError(
            f"Translate endpoint returned status {response.status_code}",
            response=response,
        )

    if response.encoding is None:
        response.encoding = "utf-8"

    try:
        return parse_translation(response.text)
    except MalformedResponseError as e:
        logger.warning(f"Could not parse translation response: {e}")
        raise


def translate_review(review, from_lang: str = DEFAULT_FROM_LANG, to_lang: str = DEFAULT_TO_LANG,
                     timeout=REQUEST_TIMEOUT):
    """Replace ``review.comment`` with its translation and return the same review."""
    review.comment = translate_text(review.comment, from_lang, to_lang, timeout=timeout)
    return review
