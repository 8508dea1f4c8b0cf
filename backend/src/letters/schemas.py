"""Letter request/response schemas and the wizard catalogs."""

import enum
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ..config import settings


class LetterType(str, enum.Enum):
    ACADEMIC = "academic"
    SCHOLARSHIP = "scholarship"
    MEDICAL = "medical"
    INTERNSHIP = "internship"
    JOB = "job"
    VOLUNTEER = "volunteer"
    IMMIGRATION = "immigration"
    TENANT = "tenant"
    PERSONAL = "personal"
    GRADUATE = "graduate"


class LetterGroup(str, enum.Enum):
    EDUCATION = "education"
    PROFESSIONAL = "professional"
    PERSONAL = "personal"


class Relationship(str, enum.Enum):
    MANAGER = "manager"
    PROFESSOR = "professor"
    COLLEAGUE = "colleague"
    MENTOR = "mentor"
    OTHER = "other"


class KnownTime(str, enum.Enum):
    LT_6M = "lt6m"
    BTW_6M_1Y = "btw6m1y"
    BTW_1Y_2Y = "btw1y2y"
    BTW_2Y_5Y = "btw2y5y"
    GT_5Y = "gt5y"


class Language(str, enum.Enum):
    ENGLISH = "english"
    SPANISH = "spanish"
    FRENCH = "french"
    GERMAN = "german"
    PORTUGUESE = "portuguese"


class TonePreset(str, enum.Enum):
    NEUTRAL = "Neutral"
    ENTHUSIASTIC = "Enthusiastic"
    PERSUASIVE = "Persuasive"
    OBJECTIVE = "Objective"


class OpeningStyle(str, enum.Enum):
    DIRECT_PRAISE = "Direct praise"
    QUOTE = "Quote"
    PROBLEM_SOLUTION = "Problem-solution"


class Perspective(str, enum.Enum):
    FIRST = "first"
    INSTITUTIONAL = "inst"


class WritingStyle(str, enum.Enum):
    EXECUTIVE = "Executive"
    BULLET_POINTS = "Bullet-points"
    STORYTELLING = "Storytelling"


# Wizard catalog: label and colour group of each letter type, in display order
LETTER_TYPE_CATALOG: list[tuple[LetterType, str, LetterGroup]] = [
    (LetterType.ACADEMIC, "Academic (University)", LetterGroup.EDUCATION),
    (LetterType.SCHOLARSHIP, "Scholarships & Aid", LetterGroup.EDUCATION),
    (LetterType.MEDICAL, "Medical Residency", LetterGroup.EDUCATION),
    (LetterType.GRADUATE, "Graduate School", LetterGroup.EDUCATION),
    (LetterType.INTERNSHIP, "Internship", LetterGroup.PROFESSIONAL),
    (LetterType.JOB, "Job / Employment", LetterGroup.PROFESSIONAL),
    (LetterType.VOLUNTEER, "Volunteer / NGO", LetterGroup.PROFESSIONAL),
    (LetterType.IMMIGRATION, "Immigration / Visa", LetterGroup.PERSONAL),
    (LetterType.TENANT, "Tenant / Landlord", LetterGroup.PERSONAL),
    (LetterType.PERSONAL, "Personal / Character", LetterGroup.PERSONAL),
]

MIN_LENGTH_WORDS = 150
MAX_LENGTH_WORDS = 800
LENGTH_STEP = 10


class LetterRequest(BaseModel):
    """Full wizard form. Only the applicant names are required to build a prompt."""

    # Step 1
    letter_type: LetterType = LetterType.ACADEMIC

    # Step 2: recommender
    rec_first_name: str = Field("", max_length=100)
    rec_last_name: str = Field("", max_length=100)
    rec_title: str = Field("", max_length=200)
    rec_org: str = Field("", max_length=200)
    rec_address: str = Field("", max_length=500)
    relationship: Relationship = Relationship.MANAGER
    relationship_other: str = Field("", max_length=200)
    known_time: KnownTime = KnownTime.LT_6M

    # Step 3: applicant
    applicant_first_name: str = Field("", max_length=100)
    applicant_last_name: str = Field("", max_length=100)
    applicant_sex: str = Field("", max_length=30)
    applicant_position: str = Field("", max_length=200)
    skills_and_qualities: str = Field("", max_length=5000)

    # Step 4: recipient and type-specific facts
    recipient_name: str = Field("", max_length=200)
    recipient_position: str = Field("", max_length=200)
    gpa: str = Field("", max_length=20)
    visa_type: str = Field("", max_length=100)
    rental_address: str = Field("", max_length=500)
    residency_specialty: str = Field("", max_length=200)

    # Step 5: personalisation
    language: Language = Language.ENGLISH
    tone_preset: TonePreset = TonePreset.NEUTRAL
    formality: int = Field(0, ge=0, le=2)
    length_words: int = Field(300, ge=MIN_LENGTH_WORDS, le=MAX_LENGTH_WORDS)
    opening_style: OpeningStyle = OpeningStyle.DIRECT_PRAISE
    perspective: Perspective = Perspective.FIRST
    style_tags: list[WritingStyle] = Field(default_factory=list)
    creativity: float = Field(0.5, ge=0.0, le=1.0)
    include_anecdote: bool = False
    include_metrics: bool = False
    grammar_check: bool = False

    additional_context: str = Field("", max_length=10_000)

    @field_validator(
        "rec_first_name",
        "rec_last_name",
        "rec_title",
        "rec_org",
        "rec_address",
        "relationship_other",
        "applicant_first_name",
        "applicant_last_name",
        "applicant_sex",
        "applicant_position",
        "skills_and_qualities",
        "recipient_name",
        "recipient_position",
        "gpa",
        "visa_type",
        "rental_address",
        "residency_specialty",
        "additional_context",
        mode="before",
    )
    @classmethod
    def strip_text(cls, v: object) -> str:
        return "" if v is None else str(v).strip()

    @field_validator("length_words")
    @classmethod
    def snap_to_step(cls, v: int) -> int:
        if v % LENGTH_STEP:
            raise ValueError(f"length_words must be a multiple of {LENGTH_STEP}")
        return v

    @field_validator("style_tags")
    @classmethod
    def dedupe_tags(cls, v: list[WritingStyle]) -> list[WritingStyle]:
        return list(dict.fromkeys(v))


class GenerateRequest(BaseModel):
    prompt: str = Field(..., max_length=settings.max_prompt_size)

    @field_validator("prompt")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Prompt is required")
        return v


class LetterGenerateRequest(BaseModel):
    """Wizard submission: the form plus an optional attachment."""

    request: LetterRequest
    document_key: str = Field("", max_length=1024)
    document_text: str = Field("", max_length=50_000)


class WizardStepRequest(BaseModel):
    step: int = Field(..., ge=1)
    form: dict = Field(default_factory=dict)
    direction: Literal["next", "back"] = "next"
