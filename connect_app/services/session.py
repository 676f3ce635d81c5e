"""
Form session for the activity generator page.

Holds the one form the page shows: the three fields, the current
activity, the inline error and the busy flag. Lives in process memory;
nothing is stored.

Generation runs as an asyncio task tagged with an epoch token:
- submit() advances the epoch and spawns the task
- reset() advances the epoch and cancels the task
- a finished task only applies its result if the epoch has not moved
"""

import asyncio
from datetime import datetime
from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from connect_app.data.content import ActivityType, GENERATION_FAILED_MESSAGE
from connect_app.services.activity import ActivityService, activity_service
from connect_app.services.generator import (
    FormInput,
    GeneratedActivity,
    GenerationInProgressError,
    MissingFieldError,
    UnknownFieldError,
)

FIELD_NAMES = {
    "year_level": "year_level",
    "subject_area": "subject_area",
    "unit_topic": "unit_topic",
    "yearLevel": "year_level",
    "subjectArea": "subject_area",
    "unitTopic": "unit_topic",
}


class FormState(BaseModel):
    """Snapshot of the page state."""
    form: FormInput
    activity: Optional[GeneratedActivity] = None
    error: str = ""
    is_loading: bool = False
    epoch: int = 0
    last_activity: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class FormSession:
    """
    The form/session instance behind the page.

    State:
    {
        "form": FormInput,               # edited field by field
        "activity": GeneratedActivity,   # None until a generation lands
        "error": str,                    # inline message, "" when clear
        "is_loading": bool,              # True while a generation is pending
        "epoch": int,                    # advanced by submit and reset
    }
    """

    def __init__(self, service: Optional[ActivityService] = None):
        self.service = service or activity_service
        self.form = FormInput()
        self.activity: Optional[GeneratedActivity] = None
        self.error = ""
        self.is_loading = False
        self.epoch = 0
        self.last_activity: Optional[str] = None
        self._task: Optional[asyncio.Task] = None

    # =========================================================================
    # Form fields
    # =========================================================================

    def update_field(self, name: str, value: str) -> FormInput:
        """Set one field; accepts snake_case or camelCase names."""
        field = FIELD_NAMES.get(name)
        if field is None:
            raise UnknownFieldError(f"Unknown form field: {name}")
        self.form = self.form.model_copy(update={field: value})
        self._touch()
        return self.form

    def update(self, **fields: Optional[str]) -> FormInput:
        """Set several fields at once; None values are skipped."""
        for name, value in fields.items():
            if value is not None:
                self.update_field(name, value)
        return self.form

    # =========================================================================
    # Generation
    # =========================================================================

    def submit(self, activity_type: Optional[ActivityType] = None) -> int:
        """
        Start a generation for the current form.

        Returns the epoch token of the started generation.

        Raises:
            GenerationInProgressError: a generation is still pending
            MissingFieldError: a field is empty (also stored in self.error)
        """
        if self.is_loading:
            raise GenerationInProgressError("An activity is already being generated")

        self.error = ""
        try:
            self.service.validate(self.form)
        except MissingFieldError as e:
            self.error = e.message
            self._touch()
            raise

        self.epoch += 1
        self.is_loading = True
        self._touch()

        self._task = asyncio.create_task(
            self._run(self.epoch, self.form, activity_type)
        )
        print(f"[Session] Generation {self.epoch} started")
        return self.epoch

    async def _run(
        self,
        epoch: int,
        form: FormInput,
        activity_type: Optional[ActivityType]
    ) -> None:
        try:
            activity = await self.service.create_activity(form, activity_type)
        except asyncio.CancelledError:
            print(f"[Session] Generation {epoch} cancelled")
            raise
        except Exception as e:
            print(f"[Session] Generation {epoch} failed: {type(e).__name__}: {str(e)}")
            if epoch == self.epoch:
                self.error = GENERATION_FAILED_MESSAGE
                self.is_loading = False
                self._touch()
            return

        if epoch != self.epoch:
            print(f"[Session] Discarding stale generation {epoch} (now {self.epoch})")
            return

        self.activity = activity
        self.is_loading = False
        self._touch()

    async def wait(self) -> FormState:
        """Wait for the pending generation (if any) and return the state."""
        task = self._task
        if task is not None and not task.done():
            # asyncio.wait never raises the task's cancellation
            await asyncio.wait({task})
        return self.snapshot()

    # =========================================================================
    # Reset & cleanup
    # =========================================================================

    def reset(self) -> FormState:
        """Clear the activity and the form; drop any pending generation."""
        self.epoch += 1
        self.cancel_pending()
        self.form = FormInput()
        self.activity = None
        self.error = ""
        self.is_loading = False
        self._touch()
        print(f"[Session] Reset (epoch {self.epoch})")
        return self.snapshot()

    def cancel_pending(self) -> None:
        """Cancel the pending generation task, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def snapshot(self) -> FormState:
        return FormState(
            form=self.form,
            activity=self.activity,
            error=self.error,
            is_loading=self.is_loading,
            epoch=self.epoch,
            last_activity=self.last_activity,
        )

    def _touch(self) -> None:
        self.last_activity = datetime.utcnow().isoformat()


# Singleton instance
form_session = FormSession()
