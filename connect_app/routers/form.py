"""
Form Router - the page behind the activity generator

This module drives the single form session:
1. Field edits (year level, subject area, unit topic)
2. Submit, with the simulated generation delay
3. Reset ("Create New")
4. Print and plain-text screens of what the page shows

Page flow:
    form view  --submit-->  "Generating..."  --delay-->  activity view
    activity view  --reset-->  empty form view
"""

import textwrap
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse, PlainTextResponse
from connect_app.config import get_settings
from connect_app.data.content import ActivityType, SUBJECT_AREAS, get_catalog
from connect_app.services.generator import (
    FormUpdate,
    GeneratedActivity,
    GenerationInProgressError,
    MissingFieldError,
)
from connect_app.services.session import FormState, form_session

settings = get_settings()

router = APIRouter(prefix="/api")


# =============================================================================
# CATALOG
# =============================================================================

@router.get("/catalog")
async def catalog():
    """Activity types (with icons) and subject areas for the selectors."""
    return get_catalog()


# =============================================================================
# FORM STATE
# =============================================================================

@router.get("/form", response_model=FormState)
async def get_form(wait: bool = False):
    """
    Current page state.

    With ?wait=true the call blocks until the pending generation
    (if any) has finished or been cancelled.
    """
    if wait:
        return await form_session.wait()
    return form_session.snapshot()


@router.patch("/form", response_model=FormState)
async def update_form(update: FormUpdate):
    """Edit one or more fields."""
    form_session.update(**update.model_dump(exclude_none=True))
    return form_session.snapshot()


@router.post("/form/generate", response_model=FormState, status_code=202)
async def generate(activity_type: Optional[ActivityType] = None):
    """
    Submit the form.

    202: generation started, poll GET /api/form?wait=true for the result
    400: a field is empty (message also shown inline on the screen)
    409: a generation is already running
    """
    try:
        form_session.submit(activity_type)
    except MissingFieldError as e:
        return JSONResponse(
            status_code=400,
            content={"detail": e.message, "missingFields": e.missing_fields},
        )
    except GenerationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return form_session.snapshot()


@router.post("/form/reset", response_model=FormState)
async def reset():
    """Create New: clear the activity and all three fields."""
    return form_session.reset()


# =============================================================================
# PRINT & SCREENS
# =============================================================================

@router.get("/form/print", response_class=PlainTextResponse)
async def print_activity():
    """Printable copy of the current activity."""
    if form_session.activity is None:
        raise HTTPException(status_code=404, detail="No activity to print")
    return render_printable(form_session.activity)


@router.get("/form/screen", response_class=PlainTextResponse)
async def screen():
    """What the page currently shows, as text."""
    return render_screen(form_session.snapshot())


def render_printable(activity: GeneratedActivity, width: Optional[int] = None) -> str:
    """Title, prompt and numbered questions, wrapped for paper."""
    width = width or settings.print_width
    lines = [activity.title, "=" * min(len(activity.title), width), ""]
    lines.extend(textwrap.wrap(activity.prompt, width))
    lines.append("")
    lines.append("Discussion Questions")
    for number, question in enumerate(activity.questions, 1):
        lines.extend(
            textwrap.wrap(
                question,
                width,
                initial_indent=f"{number}. ",
                subsequent_indent=" " * (len(str(number)) + 2),
            )
        )
    return "\n".join(lines)


def render_screen(state: FormState, width: Optional[int] = None) -> str:
    """Form view or activity view, depending on the state."""
    width = width or settings.print_width
    lines = [
        settings.app_name,
        "Create engaging classroom starter activities in seconds",
        "",
    ]

    if state.activity is not None:
        lines.append(render_printable(state.activity, width))
        lines.extend(["", "[Create New]  [Print]"])
        return "\n".join(lines)

    lines.extend(form_view(state))
    return "\n".join(lines)


def form_view(state: FormState) -> List[str]:
    form = state.form
    lines = [
        f"Year Level:   {form.year_level or '(e.g. Year 8, Grade 10, etc.)'}",
        f"Subject Area: {form.subject_area or '(Select a subject area)'}",
        f"Unit Topic:   {form.unit_topic or '(e.g. Fractions)'}",
        "",
        "Subject areas: " + ", ".join(SUBJECT_AREAS),
        "",
    ]
    if state.error:
        lines.extend([f"! {state.error}", ""])

    if state.is_loading:
        lines.append("[Generating...]")
    else:
        lines.append("[Generate Connect Activity]")
    return lines
