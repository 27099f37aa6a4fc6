from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict
import logging
import requests

from config import DEFAULT_FROM_LANG, DEFAULT_TO_LANG
from services.translator import translate_text, translate_review, TranslationError

logger = logging.getLogger(__name__)

router = APIRouter()

# Only the comment is translated; any other fields are echoed back untouched
class UserReview(BaseModel):
    model_config = ConfigDict(extra="allow")

    comment: str

class TranslateResponse(BaseModel):
    translated_text: str

def upstream_error(e: Exception) -> HTTPException:
    """Map a failed upstream translation to a 502."""
    if isinstance(e, requests.HTTPError) and e.response is not None:
        return HTTPException(status_code=502, detail=f"Translation service returned status {e.response.status_code}")
    if isinstance(e, TranslationError):
        return HTTPException(status_code=502, detail=f"Unexpected translation response: {str(e)}")
    return HTTPException(status_code=502, detail=f"Translation service unavailable: {str(e)}")

@router.post("/translate/", response_model=TranslateResponse)
def translate(text: str, from_lang: str = DEFAULT_FROM_LANG, to_lang: str = DEFAULT_TO_LANG):
    try:
        translation = translate_text(text, from_lang, to_lang)
        return {"translated_text": translation}
    except (requests.RequestException, TranslationError) as e:
        logger.error(f"Error translating text: {str(e)}")
        raise upstream_error(e)
    except Exception as e:
        logger.error(f"Unexpected error in translation: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Translation error: {str(e)}")

@router.post("/translate_review/")
def translate_user_review(review: UserReview, from_lang: str = DEFAULT_FROM_LANG, to_lang: str = DEFAULT_TO_LANG):
    try:
        return translate_review(review, from_lang, to_lang)
    except (requests.RequestException, TranslationError) as e:
        logger.error(f"Error translating review: {str(e)}")
        raise upstream_error(e)
    except Exception as e:
        logger.error(f"Unexpected error in review translation: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Review translation error: {str(e)}")
