"""
Stateless generation endpoint.

Same contract a real text-generation service would expose:
    {yearLevel, subjectArea, unitTopic} -> {type, icon, title, prompt, questions}

Does not touch the form session.
"""

from typing import Optional
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from connect_app.data.content import ActivityType
from connect_app.services.activity import activity_service
from connect_app.services.generator import FormInput, GeneratedActivity, MissingFieldError

router = APIRouter(prefix="/api")


@router.post("/activities", response_model=GeneratedActivity)
async def create_activity(form: FormInput, activity_type: Optional[ActivityType] = None):
    """
    Generate an activity after the simulated delay.

    Pass ?activity_type=... to skip the random draw.
    """
    try:
        return await activity_service.create_activity(form, activity_type)
    except MissingFieldError as e:
        return JSONResponse(
            status_code=400,
            content={"detail": e.message, "missingFields": e.missing_fields},
        )
