"""
Lambda handlers for check-in based and starter practice recommendations.
"""
from typing import Dict

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.handlers.daily_recommendations import (
    INTERNAL_ERROR_MESSAGE,
    PROFILE_NOT_FOUND_MESSAGE,
    UPSTREAM_FAILED_MESSAGE
)
from src.services.exceptions import ProfileNotFound, UpstreamFetchFailed
from src.services.recommendation import RecommendationEngine
from src.services.starter_practices import select_starter_practices
from src.services.wellness_store import WellnessStore
from src.utils.logging import logger
from src.utils.middleware import json_response, require_user

tracer = Tracer()

@logger.inject_lambda_context(clear_state=True)
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict, context: LambdaContext, user_id: str = None) -> Dict:
    """
    Handle a personalized recommendation request.

    Users without recent check-ins get an empty list, which the app
    renders by hiding the card.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID injected by require_user

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        result = RecommendationEngine(user_id).generate_personalized_recommendations()
        return json_response(200, {
            "success": True,
            "feeling_id": result.feeling_id,
            "feeling_count": result.feeling_count,
            "description": result.description,
            "recommendations": result.content_ids
        })

    except ProfileNotFound:
        return json_response(404, {"error": PROFILE_NOT_FOUND_MESSAGE})

    except UpstreamFetchFailed:
        logger.exception("Upstream fetch failed while generating personalized recommendations")
        return json_response(503, {"error": UPSTREAM_FAILED_MESSAGE})

    except Exception:
        logger.exception("Error generating personalized recommendations")
        return json_response(500, {"error": INTERNAL_ERROR_MESSAGE})

@logger.inject_lambda_context(clear_state=True)
@tracer.capture_lambda_handler
@require_user
def starter_practices_handler(event: Dict, context: LambdaContext, user_id: str = None) -> Dict:
    """
    Handle a request for short, beginner-friendly starter practices.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID injected by require_user

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        content_ids = select_starter_practices(WellnessStore().get_active_content())
        return json_response(200, {
            "success": True,
            "recommendations": content_ids
        })

    except UpstreamFetchFailed:
        logger.exception("Upstream fetch failed while selecting starter practices")
        return json_response(503, {"error": UPSTREAM_FAILED_MESSAGE})

    except Exception:
        logger.exception("Error selecting starter practices")
        return json_response(500, {"error": INTERNAL_ERROR_MESSAGE})
