"""
Lambda handlers for generating daily content recommendations.
"""
from typing import Dict, List
import json
import os

from aws_lambda_powertools import Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.services.constants import DEFAULT_MAX_RECOMMENDATIONS
from src.services.exceptions import ProfileNotFound, UpstreamFetchFailed
from src.services.in_between import get_encouragements, get_in_between_config, sanitize_messaging
from src.services.recommendation import RecommendationEngine
from src.services.wellness_store import WellnessStore
from src.utils.logging import logger
from src.utils.middleware import json_response, require_user

tracer = Tracer()

PROFILE_NOT_FOUND_MESSAGE = "User wellness profile not found. Please complete onboarding."
UPSTREAM_FAILED_MESSAGE = "Unable to load your recommendations right now. Please try again."
INTERNAL_ERROR_MESSAGE = "Internal server error"

def get_max_recommendations() -> int:
    """Get the configured maximum number of daily recommendations."""
    value = os.environ.get("MAX_DAILY_RECOMMENDATIONS")
    if not value:
        return DEFAULT_MAX_RECOMMENDATIONS
    try:
        max_items = int(value)
    except ValueError:
        logger.warning(f"Invalid MAX_DAILY_RECOMMENDATIONS value: {value}")
        return DEFAULT_MAX_RECOMMENDATIONS
    return max_items if max_items > 0 else DEFAULT_MAX_RECOMMENDATIONS

@logger.inject_lambda_context(clear_state=True)
@tracer.capture_lambda_handler
@require_user
def handler(event: Dict, context: LambdaContext, user_id: str = None) -> Dict:
    """
    Handle an on-demand recommendation request.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID injected by require_user

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        engine = RecommendationEngine(user_id, max_items=get_max_recommendations())
        recommendation = engine.generate_daily_recommendations()
        ctx = engine.last_context
        in_between = get_in_between_config(ctx.life_stage if ctx else None)

        return json_response(200, {
            "success": True,
            "recommendations": recommendation.content_ids,
            "metadata": {
                "cycle_phase": recommendation.cycle_phase,
                "pregnancy_status": recommendation.pregnancy_status,
                "primary_dosha": ctx.primary_dosha.value if ctx and ctx.primary_dosha else None,
                "generated_at": recommendation.generated_at.isoformat(),
                "supportive_message": sanitize_messaging(in_between.supportive_message, in_between) or None,
                "gentle_reminder": sanitize_messaging(in_between.gentle_reminder, in_between) or None,
                "encouragements": get_encouragements(in_between)
            }
        })

    except ProfileNotFound:
        logger.info("Recommendations unavailable until onboarding is complete")
        return json_response(404, {"error": PROFILE_NOT_FOUND_MESSAGE})

    except UpstreamFetchFailed:
        logger.exception("Upstream fetch failed while generating recommendations")
        return json_response(503, {"error": UPSTREAM_FAILED_MESSAGE})

    except Exception:
        logger.exception("Error generating recommendations")
        return json_response(500, {"error": INTERNAL_ERROR_MESSAGE})

def generate_for_users(user_ids: List[str], store: WellnessStore) -> Dict[str, int]:
    """
    Regenerate recommendations for each user, isolating per-user failures.

    Returns:
        Counts of generated, skipped (no profile) and failed users
    """
    results = {"generated": 0, "skipped": 0, "failed": 0}
    max_items = get_max_recommendations()

    for user_id in user_ids:
        try:
            RecommendationEngine(user_id, store=store, max_items=max_items).generate_daily_recommendations()
            results["generated"] += 1
        except ProfileNotFound:
            results["skipped"] += 1
        except Exception as e:
            results["failed"] += 1
            logger.exception("Failed to generate recommendations for user", extra={
                "user_id": user_id,
                "error_type": e.__class__.__name__
            })

    return results

@logger.inject_lambda_context(clear_state=True)
@tracer.capture_lambda_handler
def scheduled_handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle the scheduled daily regeneration for all users.

    Args:
        event: EventBridge scheduled event
        context: Lambda context

    Returns:
        Lambda response
    """
    try:
        store = WellnessStore()
        user_ids = store.list_user_ids()
        logger.info(f"Found {len(user_ids)} wellness profiles")

        results = generate_for_users(user_ids, store)
        logger.info("Daily recommendations generated", extra=results)

        return {
            "statusCode": 200,
            "body": json.dumps({
                "message": "Daily recommendations generated",
                "user_count": len(user_ids),
                **results
            })
        }

    except Exception:
        logger.exception("Error generating scheduled recommendations")
        return {
            "statusCode": 500,
            "body": json.dumps({"error": INTERNAL_ERROR_MESSAGE})
        }
