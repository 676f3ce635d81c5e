"""
Canned content for the starter activity generator.

Structure:
- ACTIVITY_TYPES: the five activity kinds and their display icons
- SUBJECT_AREAS: options offered by the subject selector
- PROMPT_TEMPLATES: prompt prose keyed by subject area
- QUESTION_TEMPLATES: four discussion questions keyed by activity type

Templates use str.format placeholders:
    {unit_topic}, {subject_area}, {activity_label}
"""

from enum import Enum
from typing import List


# =============================================================================
# ACTIVITY TYPES
# =============================================================================

class ActivityType(str, Enum):
    odd_one_out = "Odd One Out"
    mystery_visual = "Mystery Visual"
    weird_fact_or_lie = "Weird Fact or Lie"
    what_if = "What If..."
    connection_challenge = "Connection Challenge"


ACTIVITY_ICONS = {
    ActivityType.odd_one_out: "🧩",
    ActivityType.mystery_visual: "🔍",
    ActivityType.weird_fact_or_lie: "⁉️",
    ActivityType.what_if: "💭",
    ActivityType.connection_challenge: "🔗",
}

# Draw order for the random pick
ACTIVITY_TYPES = list(ActivityType)


# =============================================================================
# SUBJECT AREAS (selector options)
# =============================================================================

SUBJECT_AREAS = [
    "Mathematics",
    "Science",
    "English",
    "History",
    "Geography",
    "Art",
    "Physical Education",
    "Music",
]


# =============================================================================
# MESSAGES
# =============================================================================

MISSING_FIELDS_MESSAGE = "Please fill out all fields before generating an activity."
GENERATION_FAILED_MESSAGE = "Failed to generate activity. Please try again."


# =============================================================================
# TEMPLATES
# =============================================================================

TITLE_TEMPLATE = "{icon} {activity_type} - Which of these doesn't belong?"

PROMPT_TEMPLATES = {
    "Mathematics": (
        "Look at these four mathematical concepts related to {unit_topic}. "
        "Three of them share a common property, but one doesn't fit with the "
        "others. Can you identify which one is different and explain why?"
    ),
    "Science": (
        "Examine these scientific elements related to {unit_topic}. "
        "Which one is the odd one out based on its properties or characteristics?"
    ),
}

DEFAULT_PROMPT_TEMPLATE = (
    "Consider these four items related to {unit_topic} in {subject_area}. "
    "One of them doesn't belong with the others. Identify which one and "
    "explain your reasoning."
)

QUESTION_TEMPLATES = {
    ActivityType.odd_one_out: [
        "Which item do you think is the odd one out and why?",
        "Could any of the other items be considered the odd one out for different reasons?",
        "What connections can you find between all four items despite their differences?",
        "How do these items relate to our current unit on {unit_topic}?",
    ],
    ActivityType.mystery_visual: [
        "What do you observe in this visual?",
        "How does this connect to our study of {unit_topic}?",
        "What questions does this visual raise for you?",
        "How might this visual represent a key concept in {subject_area}?",
    ],
}

# Weird Fact or Lie, What If... and Connection Challenge
DEFAULT_QUESTION_TEMPLATES = [
    "What's your initial reaction to this {activity_label}?",
    "How does this connect to what we've been learning about {unit_topic}?",
    "What new perspective does this give you on the topic?",
    "How might you apply this thinking to solve problems in {subject_area}?",
]


# =============================================================================
# LOOKUPS
# =============================================================================

def get_icon(activity_type: ActivityType) -> str:
    """Get the display icon for an activity type."""
    return ACTIVITY_ICONS[ActivityType(activity_type)]


def get_title(activity_type: ActivityType) -> str:
    activity_type = ActivityType(activity_type)
    return TITLE_TEMPLATE.format(
        icon=get_icon(activity_type),
        activity_type=activity_type.value,
    )


def get_prompt(subject_area: str, unit_topic: str) -> str:
    """Get the activity prompt for a subject area."""
    template = PROMPT_TEMPLATES.get(subject_area, DEFAULT_PROMPT_TEMPLATE)
    return template.format(unit_topic=unit_topic, subject_area=subject_area)


def get_questions(
    activity_type: ActivityType,
    subject_area: str,
    unit_topic: str
) -> List[str]:
    """Get the four discussion questions for an activity type."""
    activity_type = ActivityType(activity_type)
    templates = QUESTION_TEMPLATES.get(activity_type, DEFAULT_QUESTION_TEMPLATES)
    return [
        t.format(
            unit_topic=unit_topic,
            subject_area=subject_area,
            activity_label=activity_type.value.lower(),
        )
        for t in templates
    ]


def get_catalog() -> dict:
    """Selector options for clients."""
    return {
        "activity_types": [
            {"type": t.value, "icon": ACTIVITY_ICONS[t]} for t in ACTIVITY_TYPES
        ],
        "subject_areas": SUBJECT_AREAS.copy(),
    }
