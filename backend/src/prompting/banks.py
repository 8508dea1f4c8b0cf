"""Static lookup tables for the prompt builder.

Every letter-type keyed bank carries a ``"default"`` entry, used for letter
types the bank does not know about. The resolution helpers at the bottom
are total: unexpected input resolves to a generic label instead of raising.
"""

from typing import NamedTuple

DEFAULT = "default"


class PraiseTemplate(NamedTuple):
    """Comparative praise with a ``{pct}`` placeholder drawn from [low, high]."""

    text: str
    low: int
    high: int


# =============================================================================
# ENUM -> DISPLAY TEXT
# =============================================================================

LANGUAGE_NAMES = {
    "english": "English",
    "spanish": "Spanish",
    "french": "French",
    "german": "German",
    "portuguese": "Portuguese",
}

RELATIONSHIP_LABELS = {
    "manager": "Manager / Supervisor",
    "professor": "Professor / Academic Advisor",
    "colleague": "Coworker / Colleague",
    "mentor": "Mentor / Coach",
}

KNOWN_TIMES = {
    "lt6m": "less than 6 months",
    "btw6m1y": "6 months – 1 year",
    "btw1y2y": "1 – 2 years",
    "btw2y5y": "2 – 5 years",
    "gt5y": "more than 5 years",
}

PERSPECTIVES = {
    "first": "first-person (I)",
    "inst": "institutional (We)",
}

TONES = ("neutral", "enthusiastic", "persuasive", "objective")
OPENING_STYLES = ("Direct praise", "Quote", "Problem-solution")

DEFAULT_LANGUAGE = "English"
DEFAULT_RELATIONSHIP = "Colleague"
DEFAULT_KNOWN_TIME = "some time"
DEFAULT_PERSPECTIVE = PERSPECTIVES["first"]
DEFAULT_TONE = "neutral"
DEFAULT_OPENING_STYLE = "Direct praise"


# =============================================================================
# ANECDOTES
# =============================================================================

ANECDOTES: dict[str, list[str]] = {
    "academic": [
        "a time they went beyond the syllabus to answer a question that puzzled the whole class",
        "how they led a study group through the hardest unit of the course",
        "an original idea they raised in a seminar that changed how the discussion unfolded",
        "the moment they turned a failed experiment into a well-argued lab report",
        "how they balanced a demanding course load with a research assistantship",
    ],
    "scholarship": [
        "how they kept their grades up while working part-time to support their family",
        "a community project they started with almost no budget",
        "the moment they chose a harder course because they wanted the challenge",
        "how they mentored younger students who were struggling academically",
        "a setback they overcame that shows why this award matters to them",
    ],
    "medical": [
        "a patient encounter where their empathy changed the outcome of a difficult conversation",
        "a night shift where they stayed calm during an unexpected emergency",
        "how they caught a detail in a chart that the rest of the team had missed",
        "the way they explained a complex diagnosis to a frightened family",
        "how they organised a teaching session for fellow students on their own initiative",
    ],
    "internship": [
        "their first week, when they shipped a small but real improvement to the team",
        "a time they asked the question that unblocked a stalled project",
        "how they taught themselves a new tool over a weekend to meet a deadline",
        "a presentation they gave to senior staff that exceeded expectations",
        "how they handled feedback on an early draft and came back with a much stronger version",
    ],
    "job": [
        "a project they rescued when it was behind schedule",
        "the way they handled a difficult client with professionalism",
        "a process they redesigned that saved the team hours every week",
        "how they onboarded and supported a new colleague",
        "a decision they made under pressure that proved to be the right call",
    ],
    "volunteer": [
        "a fundraising event they organised from scratch",
        "how they comforted a beneficiary during a hard moment",
        "the way they recruited and motivated new volunteers",
        "a logistics problem they solved on the day of a major event",
        "how they kept showing up every week, even during exam periods",
    ],
    "immigration": [
        "how they became an active member of the local community",
        "a time they helped a neighbour in need without being asked",
        "their contribution to a local business or organisation",
        "how they learned the language and customs with remarkable dedication",
        "a community event where their presence made a visible difference",
    ],
    "tenant": [
        "how they reported a maintenance issue early and helped prevent bigger damage",
        "the way they kept the property clean and well cared for",
        "a time they were considerate to neighbours during a renovation",
        "how they communicated promptly and politely about a late delivery of keys",
        "how they left the unit in better condition than they found it",
    ],
    "personal": [
        "a moment that showed their honesty when nobody was watching",
        "how they supported a friend through a difficult period",
        "a commitment they kept even when it cost them personally",
        "the way they handled a disagreement with fairness and respect",
        "a small act of kindness that says a lot about their character",
    ],
    "graduate": [
        "an independent research question they pursued beyond course requirements",
        "how they handled a difficult dataset or source with rigour",
        "a conference or poster presentation where they defended their work well",
        "the way they collaborated with doctoral students on a shared project",
        "how they responded to critical feedback on a thesis chapter",
    ],
    DEFAULT: [
        "a moment that showed their reliability under pressure",
        "a time they took initiative without being asked",
        "how they supported the people around them",
        "a challenge they met with creativity and persistence",
        "a contribution that had a lasting effect on their team",
    ],
}


# =============================================================================
# COMPARATIVE PRAISE
# =============================================================================

PRAISE: dict[str, list[PraiseTemplate]] = {
    "academic": [
        PraiseTemplate("in the top {pct}% of students I have taught", 1, 5),
        PraiseTemplate("among the top {pct}% of students in their cohort", 1, 5),
        PraiseTemplate("one of the strongest students I have supervised, in the top {pct}%", 1, 5),
    ],
    "scholarship": [
        PraiseTemplate("in the top {pct}% of applicants I have recommended for financial aid", 1, 5),
        PraiseTemplate("among the top {pct}% of students in their year", 1, 5),
    ],
    "medical": [
        PraiseTemplate("in the top {pct}% of medical students I have worked with on the wards", 1, 5),
        PraiseTemplate("among the top {pct}% of trainees in clinical judgement", 1, 5),
    ],
    "internship": [
        PraiseTemplate("in the top {pct}% of interns our organisation has hosted", 1, 5),
        PraiseTemplate("among the top {pct}% of junior contributors I have mentored", 1, 5),
    ],
    "job": [
        PraiseTemplate("in the top {pct}% of professionals I have managed", 1, 5),
        PraiseTemplate("among the top {pct}% of performers on the team", 1, 5),
    ],
    "volunteer": [
        PraiseTemplate("in the top {pct}% of volunteers in our programme", 1, 5),
        PraiseTemplate("present at {pct}% of scheduled shifts", 80, 100),
    ],
    "immigration": [
        PraiseTemplate("among the top {pct}% of contributors to our community", 1, 5),
        PraiseTemplate("involved in {pct}% of the community events I organised", 80, 100),
    ],
    "tenant": [
        PraiseTemplate("a tenant who paid rent on time {pct}% of the time", 80, 100),
        PraiseTemplate("among the top {pct}% of tenants I have rented to", 1, 5),
        PraiseTemplate("a tenant whose unit passed {pct}% of routine inspections without remarks", 80, 100),
    ],
    "personal": [
        PraiseTemplate("among the top {pct}% of people I would trust without hesitation", 1, 5),
    ],
    "graduate": [
        PraiseTemplate("in the top {pct}% of students I have advised on research", 1, 5),
        PraiseTemplate("among the top {pct}% of candidates I have recommended for graduate study", 1, 5),
    ],
    DEFAULT: [
        PraiseTemplate("a standout individual in their cohort", 0, 0),
        PraiseTemplate("in the top {pct}% of people I have worked with", 1, 5),
    ],
}


# =============================================================================
# METRICS (10 verbs x 10 templates per letter type)
# =============================================================================

METRIC_VERBS: dict[str, list[str]] = {
    "academic": [
        "raised", "improved", "increased", "boosted", "lifted",
        "strengthened", "grew", "advanced", "elevated", "accelerated",
    ],
    "scholarship": [
        "raised", "improved", "increased", "boosted", "expanded",
        "grew", "strengthened", "lifted", "advanced", "multiplied",
    ],
    "medical": [
        "reduced", "improved", "cut", "lowered", "increased",
        "raised", "shortened", "decreased", "boosted", "enhanced",
    ],
    "internship": [
        "improved", "reduced", "increased", "automated", "streamlined",
        "accelerated", "cut", "boosted", "expanded", "optimised",
    ],
    "job": [
        "increased", "reduced", "grew", "improved", "cut",
        "boosted", "expanded", "accelerated", "lowered", "raised",
    ],
    "volunteer": [
        "increased", "grew", "expanded", "raised", "boosted",
        "improved", "multiplied", "extended", "lifted", "strengthened",
    ],
    "immigration": [
        "increased", "grew", "expanded", "raised", "improved",
        "boosted", "strengthened", "extended", "lifted", "advanced",
    ],
    "tenant": [
        "kept", "maintained", "reduced", "improved", "cut",
        "lowered", "sustained", "held", "preserved", "raised",
    ],
    "personal": [
        "raised", "improved", "increased", "grew", "boosted",
        "expanded", "strengthened", "lifted", "advanced", "extended",
    ],
    "graduate": [
        "increased", "improved", "raised", "accelerated", "expanded",
        "strengthened", "reduced", "advanced", "boosted", "grew",
    ],
    DEFAULT: [
        "improved", "increased", "reduced", "grew", "boosted",
        "raised", "cut", "expanded", "accelerated", "strengthened",
    ],
}

METRIC_TEMPLATES: dict[str, list[str]] = {
    "academic": [
        "the class average by {pct}%",
        "lab throughput by {pct}%",
        "research output by {pct}%",
        "study group attendance by {pct}%",
        "peer review scores by {pct}%",
        "assignment completion rates by {pct}%",
        "experiment reproducibility by {pct}%",
        "tutoring session attendance by {pct}%",
        "seminar participation by {pct}%",
        "exam pass rates in their study group by {pct}%",
    ],
    "scholarship": [
        "their grade point average by {pct}%",
        "club membership by {pct}%",
        "funds raised for a school project by {pct}%",
        "tutoring hours delivered by {pct}%",
        "event attendance by {pct}%",
        "community service hours by {pct}%",
        "peer mentoring reach by {pct}%",
        "test scores by {pct}%",
        "participation in academic competitions by {pct}%",
        "library program sign-ups by {pct}%",
    ],
    "medical": [
        "patient wait times by {pct}%",
        "charting accuracy by {pct}%",
        "patient satisfaction scores by {pct}%",
        "medication reconciliation errors by {pct}%",
        "discharge turnaround by {pct}%",
        "follow-up adherence by {pct}%",
        "handover completeness by {pct}%",
        "screening completion rates by {pct}%",
        "readmission rates by {pct}%",
        "teaching session attendance by {pct}%",
    ],
    "internship": [
        "report turnaround time by {pct}%",
        "test coverage by {pct}%",
        "data entry errors by {pct}%",
        "team productivity by {pct}%",
        "manual work in a weekly process by {pct}%",
        "dashboard load times by {pct}%",
        "response times to internal requests by {pct}%",
        "social media engagement by {pct}%",
        "documentation coverage by {pct}%",
        "onboarding time for new tools by {pct}%",
    ],
    "job": [
        "sales revenue by {pct}%",
        "operating costs by {pct}%",
        "customer retention by {pct}%",
        "delivery times by {pct}%",
        "team output by {pct}%",
        "customer satisfaction by {pct}%",
        "defect rates by {pct}%",
        "project delivery speed by {pct}%",
        "lead conversion by {pct}%",
        "process efficiency by {pct}%",
    ],
    "volunteer": [
        "volunteer sign-ups by {pct}%",
        "donations collected by {pct}%",
        "meals served by {pct}%",
        "event attendance by {pct}%",
        "volunteer retention by {pct}%",
        "community outreach by {pct}%",
        "hours contributed by {pct}%",
        "beneficiaries reached by {pct}%",
        "supplies distributed by {pct}%",
        "program awareness by {pct}%",
    ],
    "immigration": [
        "participation in neighbourhood events by {pct}%",
        "membership of a local association by {pct}%",
        "sales at a local business by {pct}%",
        "attendance at community classes by {pct}%",
        "volunteer hours in the community by {pct}%",
        "funds raised for a local cause by {pct}%",
        "language-exchange participation by {pct}%",
        "customer base of the business they work for by {pct}%",
        "engagement in a faith or cultural group by {pct}%",
        "outreach to newcomers by {pct}%",
    ],
    "tenant": [
        "late payments by {pct}%",
        "maintenance requests by {pct}%",
        "utility consumption by {pct}%",
        "inspection scores by {pct}%",
        "noise complaints by {pct}%",
        "repair costs by {pct}%",
        "property upkeep ratings by {pct}%",
        "response time to landlord messages by {pct}%",
        "shared-space cleanliness ratings by {pct}%",
        "occupancy-related issues by {pct}%",
    ],
    "personal": [
        "participation in community projects by {pct}%",
        "funds raised for a charity by {pct}%",
        "attendance at a club they lead by {pct}%",
        "membership of a local group by {pct}%",
        "volunteer hours by {pct}%",
        "engagement at family or community events by {pct}%",
        "mentoring reach by {pct}%",
        "donations to a food drive by {pct}%",
        "participation in a sports team by {pct}%",
        "turnout at neighbourhood meetings by {pct}%",
    ],
    "graduate": [
        "experiment throughput by {pct}%",
        "model accuracy by {pct}%",
        "data processing time by {pct}%",
        "citation counts of a co-authored paper by {pct}%",
        "survey response rates by {pct}%",
        "reproducibility of results by {pct}%",
        "analysis runtime by {pct}%",
        "sample sizes in their study by {pct}%",
        "teaching evaluation scores by {pct}%",
        "lab efficiency by {pct}%",
    ],
    DEFAULT: [
        "efficiency by {pct}%",
        "results by {pct}%",
        "output by {pct}%",
        "satisfaction by {pct}%",
        "engagement by {pct}%",
        "participation by {pct}%",
        "performance by {pct}%",
        "quality by {pct}%",
        "turnaround time by {pct}%",
        "impact by {pct}%",
    ],
}


# =============================================================================
# CLOSINGS
# =============================================================================

# Letter types without an entry get no nudge
CLOSING_NUDGES = {
    "scholarship": "State clearly that the applicant's goals align with the purpose of this scholarship.",
    "internship": "Express confidence that the applicant will contribute from day one of the internship.",
    "immigration": "Endorse the applicant's good character and their positive contribution to the community.",
    "medical": "Affirm that the applicant is ready for the responsibilities of residency training.",
    "tenant": "Confirm that you would gladly rent to the applicant again.",
    "graduate": "Affirm that the applicant is prepared for the rigour of graduate-level research.",
}

CLOSING_LINES: dict[str, list[str]] = {
    "academic": [
        "I recommend them for admission without reservation.",
        "They have my strongest academic endorsement.",
        "I am confident they will excel in any rigorous academic programme.",
    ],
    "scholarship": [
        "I wholeheartedly recommend them for this scholarship.",
        "Few students deserve this support as much as they do.",
        "This award would be an excellent investment in their future.",
    ],
    "medical": [
        "I recommend them for residency with the highest enthusiasm.",
        "They will be an asset to any residency programme.",
        "Their patients will be fortunate to have them as a physician.",
    ],
    "internship": [
        "I recommend them for this internship without hesitation.",
        "Any team would be lucky to host them.",
        "I am certain they will make the most of this opportunity.",
    ],
    "job": [
        "I recommend them for this position without reservation.",
        "I would hire them again in a heartbeat.",
        "They will be a valuable addition to your organisation.",
    ],
    "volunteer": [
        "I recommend them for this role with great enthusiasm.",
        "Any organisation would benefit from their dedication.",
        "Their commitment to service speaks for itself.",
    ],
    "immigration": [
        "I fully support their application and vouch for their character.",
        "Our community is better for having them in it.",
        "I respectfully ask that their application be viewed favourably.",
    ],
    "tenant": [
        "I recommend them as a tenant without reservation.",
        "Any landlord would be fortunate to have them.",
        "I would welcome them back as a tenant at any time.",
    ],
    "personal": [
        "I vouch for their character without hesitation.",
        "I am proud to call them a person of integrity.",
        "I recommend them with complete confidence.",
    ],
    "graduate": [
        "I recommend them for graduate study with the highest enthusiasm.",
        "They are ready to make an original contribution to their field.",
        "I have no doubt they will thrive in a graduate programme.",
    ],
    DEFAULT: [
        "I recommend them without reservation.",
        "Please do not hesitate to contact me for further information.",
        "I am confident they will exceed your expectations.",
    ],
}


# =============================================================================
# RESOLUTION HELPERS
# =============================================================================


def _key(value: object) -> str:
    """Plain string key for an enum member or raw value."""
    raw = getattr(value, "value", value)
    return str(raw).strip() if raw is not None else ""


def language_name(value: object) -> str:
    return LANGUAGE_NAMES.get(_key(value).lower(), DEFAULT_LANGUAGE)


def relationship_label(value: object, other: str = "") -> str:
    """Relationship text; ``other`` wins when the relationship is "other"."""
    key = _key(value).lower()
    if key == "other":
        return other.strip() or DEFAULT_RELATIONSHIP
    return RELATIONSHIP_LABELS.get(key, DEFAULT_RELATIONSHIP)


def known_time_phrase(value: object) -> str:
    return KNOWN_TIMES.get(_key(value).lower(), DEFAULT_KNOWN_TIME)


def perspective_phrase(value: object) -> str:
    return PERSPECTIVES.get(_key(value).lower(), DEFAULT_PERSPECTIVE)


def tone_name(value: object) -> str:
    tone = _key(value).lower()
    return tone if tone in TONES else DEFAULT_TONE


def opening_style_name(value: object) -> str:
    style = _key(value)
    return style if style in OPENING_STYLES else DEFAULT_OPENING_STYLE


def letter_type_key(value: object) -> str:
    return _key(value).lower()


def bank_for(bank: dict, letter_type: object) -> list:
    """Entries of a letter-type keyed bank, falling back to the default entry."""
    return bank.get(letter_type_key(letter_type)) or bank[DEFAULT]
