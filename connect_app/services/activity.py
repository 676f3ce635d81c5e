"""
Activity Service

Orchestrates one generation: validate the form, draw an activity
type, hand both to the generator.

This separation of concerns means:
- Generator handles the (simulated) AI call and template composition
- Activity service handles validation and the random draw
- Routers and the form session stay clean and simple
"""

import random
from typing import Optional
from connect_app.config import get_settings
from connect_app.data.content import ACTIVITY_TYPES, ActivityType
from connect_app.services.generator import (
    FormInput,
    GeneratedActivity,
    MissingFieldError,
    SimulatedGenerator,
)

settings = get_settings()


class ActivityService:
    """
    Produces starter activities from form input.

    Strategy:
    1. Presence check on all three fields (raises MissingFieldError)
    2. Uniform random draw over the activity types, unless one is forced
    3. Generator call (simulated delay + templates)
    """

    def __init__(
        self,
        generator: Optional[SimulatedGenerator] = None,
        rng: Optional[random.Random] = None
    ):
        self.generator = generator or SimulatedGenerator()
        self.rng = rng or random.Random(settings.random_seed)

    def validate(self, form: FormInput) -> None:
        """Raise MissingFieldError if any field is empty."""
        missing = form.missing_fields()
        if missing:
            print(f"[Activity] Missing fields: {', '.join(missing)}")
            raise MissingFieldError(missing)

    def pick_activity_type(self) -> ActivityType:
        """Uniform draw from the five activity types."""
        return self.rng.choice(ACTIVITY_TYPES)

    async def create_activity(
        self,
        form: FormInput,
        activity_type: Optional[ActivityType] = None
    ) -> GeneratedActivity:
        """
        Validate the form and generate an activity.

        Args:
            form: Teacher's input
            activity_type: Force a type instead of drawing one (for testing)

        Returns:
            GeneratedActivity

        Raises:
            MissingFieldError before any waiting happens
        """
        self.validate(form)

        if activity_type is None:
            activity_type = self.pick_activity_type()

        return await self.generator.generate(form, ActivityType(activity_type))


# Singleton
activity_service = ActivityService()
