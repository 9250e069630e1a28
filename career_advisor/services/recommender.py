# career_advisor/services/recommender.py
import logging
from typing import Any, Dict

from career_advisor.database import Store
from career_advisor.errors import GenerationError, ValidationError

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Suggest 3 career paths for someone skilled in {skill}. "
    "Explain why these careers are suitable in one short sentence each."
)
FALLBACK_TEXT = "No recommendation generated."


def build_prompt(skill: str) -> str:
    return PROMPT_TEMPLATE.format(skill=skill)


def extract_text(response: Dict[str, Any]) -> str:
    """
    Text of the first candidate's first part, or FALLBACK_TEXT when the
    response is missing any level of that path.
    """
    try:
        text = response["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_TEXT
    return text or FALLBACK_TEXT


class RecommendationService:
    def __init__(self, store: Store, generator):
        self.store = store
        self.generator = generator

    def recommend(self, skill):
        if not skill:
            raise ValidationError("Skill is required.")

        # recorded before generation so failed generations still leave a row
        saved = self.store.execute("INSERT INTO skills (skill) VALUES (:skill)", {"skill": skill})
        logger.debug("Recorded skill submission id=%s", saved.lastrowid)

        try:
            response = self.generator.generate_content(build_prompt(skill))
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(str(e)) from e

        return extract_text(response)
