"""Azure OpenAI implementation of the AI service."""

from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from agents.base_agent import BaseAgent
from config import settings
from core.exceptions import LLMError
from core.logger import get_logger
from models.ai_models import CVScore, ImproveTextResult, JobMatch
from models.cv_models import (
    CVData,
    create_certificate,
    create_education,
    create_experience,
    create_language,
    create_personal_info,
    create_skill,
)
from models.value_objects import LanguageProficiency, SkillLevel
from prompts import CV_PARSING_PROMPT, CV_SCORING_PROMPT, IMPROVE_TEXT_PROMPT, JOB_MATCH_PROMPT
from repositories.base import AIService
from utils.ids import IdFactory, generate_id

logger = get_logger("agents.cv_ai")

# Synonyms models tend to use instead of the closed level names
_SKILL_LEVEL_SYNONYMS = {
    "basic": SkillLevel.BEGINNER,
    "novice": SkillLevel.BEGINNER,
    "junior": SkillLevel.BEGINNER,
    "medium": SkillLevel.INTERMEDIATE,
    "proficient": SkillLevel.ADVANCED,
    "senior": SkillLevel.ADVANCED,
    "master": SkillLevel.EXPERT,
}

_PROFICIENCY_SYNONYMS = {
    "a1": LanguageProficiency.BASIC,
    "a2": LanguageProficiency.BASIC,
    "beginner": LanguageProficiency.BASIC,
    "elementary": LanguageProficiency.BASIC,
    "b1": LanguageProficiency.CONVERSATIONAL,
    "b2": LanguageProficiency.CONVERSATIONAL,
    "intermediate": LanguageProficiency.CONVERSATIONAL,
    "c1": LanguageProficiency.PROFESSIONAL,
    "c2": LanguageProficiency.PROFESSIONAL,
    "fluent": LanguageProficiency.PROFESSIONAL,
    "advanced": LanguageProficiency.PROFESSIONAL,
    "mother tongue": LanguageProficiency.NATIVE,
    "bilingual": LanguageProficiency.NATIVE,
}


def _clamp_score(value: Any) -> int:
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, score))


def _string_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, list):
        return [str(item) for item in value if item is not None and str(item).strip()]
    return []


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def normalize_skill_level(value: Any) -> SkillLevel:
    """Map a free-form level onto SkillLevel; unknown values become intermediate."""
    key = _text(value).lower()
    try:
        return SkillLevel(key)
    except ValueError:
        return _SKILL_LEVEL_SYNONYMS.get(key, SkillLevel.INTERMEDIATE)


def normalize_proficiency(value: Any) -> LanguageProficiency:
    """Map a free-form proficiency onto LanguageProficiency; unknown values become conversational."""
    key = _text(value).lower()
    try:
        return LanguageProficiency(key)
    except ValueError:
        return _PROFICIENCY_SYNONYMS.get(key, LanguageProficiency.CONVERSATIONAL)


class CVAIAgent(BaseAgent, AIService):
    """Scores, parses, matches and rewrites CVs with Azure OpenAI."""

    system_prompt = (
        "You are an expert CV writer and recruiter. "
        "You must return a single valid JSON object and nothing else."
    )

    def __init__(
        self,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        api_key: Optional[str] = None,
        timeout: Optional[int] = None,
        max_retries: Optional[int] = None,
        client: Optional[Any] = None,
        id_factory: IdFactory = generate_id,
    ):
        super().__init__(
            model_name or settings.openai_model,
            temperature if temperature is not None else settings.openai_temperature,
            api_key,
            timeout if timeout is not None else settings.openai_timeout,
            max_retries if max_retries is not None else settings.openai_max_retries,
            client=client,
        )
        self.id_factory = id_factory

    def score_cv(self, cv_data: CVData) -> CVScore:
        data = self._complete_json(
            CV_SCORING_PROMPT.format(cv_data=self._format_cv_data(cv_data)), "cv_scoring"
        )
        breakdown = data.get("breakdown") or {}
        return self._build(
            CVScore,
            {
                "overall": _clamp_score(data.get("overall")),
                "breakdown": {
                    "completeness": _clamp_score(breakdown.get("completeness")),
                    "quality": _clamp_score(breakdown.get("quality")),
                    "atsCompatibility": _clamp_score(
                        breakdown.get("atsCompatibility", breakdown.get("ats_compatibility"))
                    ),
                    "impact": _clamp_score(breakdown.get("impact")),
                },
                "recommendations": _string_list(data.get("recommendations")),
            },
        )

    def extract_from_text(self, text: str) -> Dict[str, Any]:
        data = self._complete_json(CV_PARSING_PROMPT.format(cv_text=text), "cv_parser")
        try:
            return self._transform_llm_response(data)
        except PydanticValidationError as e:
            logger.error(f"Parsed CV does not match the CV model: {e}")
            raise LLMError("AI returned CV data in an unexpected shape") from e

    def match_job(self, cv_data: CVData, job_description: str) -> JobMatch:
        data = self._complete_json(
            JOB_MATCH_PROMPT.format(
                cv_data=self._format_cv_data(cv_data), job_description=job_description
            ),
            "job_match",
        )
        return self._build(
            JobMatch,
            {
                "score": _clamp_score(data.get("score")),
                "matchedKeywords": _string_list(data.get("matchedKeywords", data.get("matched_keywords"))),
                "missingKeywords": _string_list(data.get("missingKeywords", data.get("missing_keywords"))),
                "suggestions": _string_list(data.get("suggestions")),
            },
        )

    def improve_text(self, text: str, context: str) -> ImproveTextResult:
        data = self._complete_json(IMPROVE_TEXT_PROMPT.format(text=text, context=context), "improve_text")
        improved = _text(data.get("improvedText", data.get("improved_text")))
        if not improved:
            raise LLMError("AI returned no improved text")
        return self._build(
            ImproveTextResult,
            {
                "improvedText": improved,
                "explanation": _text(data.get("explanation")),
                "keyChanges": _string_list(data.get("keyChanges", data.get("key_changes"))),
            },
        )

    def _build(self, model_cls, values: Dict[str, Any]):
        try:
            return model_cls.model_validate(values)
        except PydanticValidationError as e:
            raise LLMError(f"AI returned an invalid {model_cls.__name__}: {e}") from e

    def _transform_llm_response(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Transform LLM response into a partial camelCase CV.

        Only sections present in the response are returned. Every list entry
        gets a fresh id; skill levels and language proficiencies are mapped
        onto the closed enumerations.
        """
        transformed: Dict[str, Any] = {}

        personal = data.get("personalInfo") or data.get("personal_info")
        if isinstance(personal, dict):
            transformed["personalInfo"] = create_personal_info(
                full_name=_text(personal.get("fullName", personal.get("full_name"))),
                email=_text(personal.get("email")),
                phone=_text(personal.get("phone")),
                location=_text(personal.get("location")),
                linkedin=_text(personal.get("linkedin")),
                website=_text(personal.get("website")),
                github=_text(personal.get("github")),
                title=_text(personal.get("title")),
            ).to_dict()

        summary = data.get("summary")
        if summary:
            transformed["summary"] = _text(summary)

        self._transform_list(data, "experience", transformed, lambda exp: create_experience(
            company=_text(exp.get("company")),
            position=_text(exp.get("position")),
            start_date=_text(exp.get("startDate", exp.get("start_date"))),
            end_date=_text(exp.get("endDate", exp.get("end_date"))) or None,
            current=bool(exp.get("current", False)),
            description=_text(exp.get("description")),
            achievements=_string_list(exp.get("achievements")),
            id_factory=self.id_factory,
        ))
        self._transform_list(data, "education", transformed, lambda edu: create_education(
            institution=_text(edu.get("institution")),
            degree=_text(edu.get("degree")),
            field=_text(edu.get("field", edu.get("fieldOfStudy"))),
            start_date=_text(edu.get("startDate", edu.get("start_date"))),
            end_date=_text(edu.get("endDate", edu.get("end_date"))) or None,
            current=bool(edu.get("current", False)),
            gpa=_text(edu.get("gpa")),
            description=_text(edu.get("description")),
            id_factory=self.id_factory,
        ))
        self._transform_list(data, "skills", transformed, lambda skill: create_skill(
            name=_text(skill.get("name")),
            level=normalize_skill_level(skill.get("level")),
            id_factory=self.id_factory,
        ))
        self._transform_list(data, "languages", transformed, lambda language: create_language(
            name=_text(language.get("name", language.get("language"))),
            proficiency=normalize_proficiency(language.get("proficiency")),
            id_factory=self.id_factory,
        ))
        self._transform_list(data, "certificates", transformed, lambda cert: create_certificate(
            name=_text(cert.get("name")),
            issuer=_text(cert.get("issuer")),
            date=_text(cert.get("date")),
            url=_text(cert.get("url")),
            id_factory=self.id_factory,
        ))

        return transformed

    @staticmethod
    def _transform_list(
        data: Dict[str, Any],
        key: str,
        transformed: Dict[str, Any],
        factory: Callable[[Dict[str, Any]], Any],
    ) -> None:
        items = data.get(key)
        if not isinstance(items, list):
            return
        entries = []
        for item in items:
            if isinstance(item, str):
                item = {"name": item}
            if isinstance(item, dict):
                entries.append(factory(item).to_dict())
        transformed[key] = entries
