"""Tests for letter service and wizard navigation."""

import io
import uuid

import pytest
from docx import Document
from pydantic import ValidationError

from src.generation.errors import InvalidInput
from src.letters.schemas import LetterRequest, Relationship
from src.letters.service import (
    build_docx,
    get_letter_for_user,
    letter_options,
    letter_to_dict,
    list_letters,
    prompt_for_request,
)
from src.letters.wizard import TOTAL_STEPS, advance, back, ensure_ready, missing_fields
from src.prompting.random_source import SeededRandom


class TestLetterRequest:
    def test_strips_text_fields(self):
        req = LetterRequest(applicant_first_name="  Ana ", applicant_last_name="Lopez\n")
        assert req.applicant_first_name == "Ana"
        assert req.applicant_last_name == "Lopez"

    def test_length_must_follow_step(self):
        with pytest.raises(ValidationError):
            LetterRequest(length_words=305)

    def test_length_bounds(self):
        with pytest.raises(ValidationError):
            LetterRequest(length_words=900)

    def test_formality_bounds(self):
        with pytest.raises(ValidationError):
            LetterRequest(formality=3)

    def test_style_tags_deduplicated(self):
        req = LetterRequest(style_tags=["Executive", "Executive", "Storytelling"])
        assert [t.value for t in req.style_tags] == ["Executive", "Storytelling"]

    def test_unknown_letter_type_rejected(self):
        with pytest.raises(ValidationError):
            LetterRequest(letter_type="astronaut")


class TestWizard:
    def test_step_one_advances(self):
        result = advance(1, {"letter_type": "academic"})
        assert result.step == 2
        assert result.complete

    def test_step_one_unknown_type(self):
        assert missing_fields(1, {"letter_type": "astronaut"}) == ["letter_type"]

    @pytest.mark.parametrize("value", [["academic"], {"value": "academic"}, 7])
    def test_step_one_non_string_type(self, value):
        assert missing_fields(1, {"letter_type": value}) == ["letter_type"]

    def test_non_string_relationship_ignored(self):
        form = {
            "rec_first_name": "Jane",
            "rec_last_name": "Doe",
            "rec_title": "Professor",
            "rec_org": "MIT",
            "relationship": ["other"],
        }
        assert missing_fields(2, form) == []

    def test_step_two_reports_missing(self):
        result = advance(2, {"rec_first_name": "Jane", "rec_last_name": " "})
        assert result.step == 2
        assert result.missing == ["rec_last_name", "rec_title", "rec_org"]

    def test_other_relationship_needs_description(self):
        form = {
            "rec_first_name": "Jane",
            "rec_last_name": "Doe",
            "rec_title": "Professor",
            "rec_org": "MIT",
            "relationship": "other",
        }
        assert missing_fields(2, form) == ["relationship_other"]

    def test_optional_steps_pass(self):
        assert advance(4, {}).step == 5

    def test_last_step_stays(self):
        assert advance(TOTAL_STEPS, {}).step == TOTAL_STEPS

    def test_back(self):
        assert back(3) == 2
        assert back(1) == 1

    def test_ensure_ready_requires_applicant(self):
        with pytest.raises(InvalidInput):
            ensure_ready(LetterRequest(applicant_first_name="Ana"))

    def test_ensure_ready_other_relationship(self, letter_request):
        with pytest.raises(InvalidInput):
            ensure_ready(letter_request.model_copy(update={"relationship": Relationship.OTHER, "relationship_other": ""}))


class TestPromptForRequest:
    def test_builds_prompt(self, letter_request):
        prompt = prompt_for_request(letter_request, rng=SeededRandom(1))
        assert prompt.startswith("Write a academic recommendation letter in English.")

    def test_incomplete_form_rejected(self):
        with pytest.raises(InvalidInput):
            prompt_for_request(LetterRequest())


class TestLetterQueries:
    def test_get_letter_for_owner(self, db_session, test_user, test_letter):
        letter = get_letter_for_user(db_session, str(test_letter.id), test_user.id)
        assert letter is not None
        assert letter.id == test_letter.id

    def test_get_letter_other_user(self, db_session, test_letter):
        assert get_letter_for_user(db_session, str(test_letter.id), uuid.uuid4()) is None

    def test_get_letter_invalid_id(self, db_session, test_user):
        assert get_letter_for_user(db_session, "not-a-uuid", test_user.id) is None

    def test_list_letters(self, db_session, test_user, test_letter):
        letters = list_letters(db_session, test_user.id)
        assert [letter.id for letter in letters] == [test_letter.id]

    def test_letter_to_dict(self, test_letter):
        data = letter_to_dict(test_letter)
        assert data["id"] == str(test_letter.id)
        assert data["content"].startswith("Dear Committee")


class TestLetterOptions:
    def test_catalog(self):
        options = letter_options()
        assert len(options["letter_types"]) == 10
        assert options["letter_types"][0] == {"value": "academic", "label": "Academic (University)", "group": "education"}
        assert "other" in options["relationships"]
        assert options["perspectives"] == ["first", "inst"]


class TestBuildDocx:
    def test_paragraph_per_line(self, test_letter):
        buf, filename = build_docx(test_letter)
        assert filename == "Recommendation_Letter.docx"

        doc = Document(io.BytesIO(buf.getvalue()))
        texts = [p.text for p in doc.paragraphs]
        assert texts == [
            "Dear Committee,",
            "I recommend Ana without reservation.",
            "Sincerely,",
            "Jane Doe",
        ]
