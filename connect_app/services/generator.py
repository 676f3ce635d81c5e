"""
Activity Generator

Stands in for the text-generation service. The "AI call" is simulated
with a fixed delay, after which the canned templates are filled in with
the form fields.

Contract (what a real service would have to honour):
    request  = {yearLevel, subjectArea, unitTopic}
    response = {type, icon, title, prompt, questions[4]}

Key Design Decisions:
1. Async-first: the delay is an awaitable, so callers can cancel it
2. Pure composition: same form + activity type always gives the same activity
3. Immutable output: GeneratedActivity is frozen once built
"""

import asyncio
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from connect_app.config import get_settings
from connect_app.data.content import (
    ActivityType,
    MISSING_FIELDS_MESSAGE,
    get_icon,
    get_prompt,
    get_questions,
    get_title,
)

settings = get_settings()


# =============================================================================
# DATA MODELS (Pydantic)
# =============================================================================

class FormInput(BaseModel):
    """The three fields the teacher fills in."""
    year_level: str = ""
    subject_area: str = ""
    unit_topic: str = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "ignore"

    def missing_fields(self) -> List[str]:
        """Names (as the client sees them) of the empty fields."""
        return [
            to_camel(name)
            for name in ("year_level", "subject_area", "unit_topic")
            if not getattr(self, name)
        ]


class FormUpdate(BaseModel):
    """Partial edit of the form; omitted fields are left alone."""
    year_level: Optional[str] = None
    subject_area: Optional[str] = None
    unit_topic: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


class GeneratedActivity(BaseModel):
    """A finished starter activity."""
    type: ActivityType
    icon: str
    title: str = Field(min_length=1)
    prompt: str = Field(min_length=1)
    questions: List[str] = Field(min_length=4, max_length=4)

    class Config:
        frozen = True


# =============================================================================
# ERRORS
# =============================================================================

class ActivityError(Exception):
    """Base class for everything the generator reports to the user."""


class MissingFieldError(ActivityError):
    """One or more required form fields are empty."""

    def __init__(self, missing_fields: List[str]):
        super().__init__(MISSING_FIELDS_MESSAGE)
        self.message = MISSING_FIELDS_MESSAGE
        self.missing_fields = missing_fields


class GenerationInProgressError(ActivityError):
    """A generation is already running for this form."""


class UnknownFieldError(ActivityError):
    """The form has no field with this name."""


# =============================================================================
# GENERATOR
# =============================================================================

class SimulatedGenerator:
    """
    Builds activities from canned templates after an artificial delay.

    Swap this class for a real text-generation client to go to
    production; callers only depend on generate().
    """

    def __init__(self, delay: Optional[float] = None):
        self.delay = settings.generation_delay if delay is None else delay

    async def generate(
        self,
        form: FormInput,
        activity_type: ActivityType
    ) -> GeneratedActivity:
        """
        Generate an activity for the form.

        Args:
            form: Validated form input
            activity_type: The drawn (or forced) activity type

        Returns:
            GeneratedActivity built from the templates

        Raises:
            asyncio.CancelledError if the caller cancels during the delay
        """
        if self.delay > 0:
            await asyncio.sleep(self.delay)

        activity = self.compose(form, activity_type)
        print(f"[Generator] Built '{activity.type.value}' activity for {form.unit_topic}")
        return activity

    def compose(self, form: FormInput, activity_type: ActivityType) -> GeneratedActivity:
        """Fill the templates in; no delay."""
        activity_type = ActivityType(activity_type)
        return GeneratedActivity(
            type=activity_type,
            icon=get_icon(activity_type),
            title=get_title(activity_type),
            prompt=get_prompt(form.subject_area, form.unit_topic),
            questions=get_questions(activity_type, form.subject_area, form.unit_topic),
        )

    async def health_check(self) -> dict:
        return {
            "status": "simulated",
            "healthy": True,
            "delay_seconds": self.delay,
        }
