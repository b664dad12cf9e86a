"""
Middleware functions for request processing.
"""
import json
from functools import wraps
from typing import Any, Callable, Dict, Optional

from src.utils.logging import logger

def json_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Build an API Gateway Lambda proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
        "isBase64Encoded": False
    }

def extract_user_id(event: Dict[str, Any]) -> Optional[str]:
    """
    Extract the authenticated user ID from an API Gateway event.

    Authentication happens upstream in the API Gateway authorizer; this only
    reads the identity it attached to the request.

    Args:
        event: API Gateway Lambda proxy event

    Returns:
        User ID if present, None otherwise
    """
    if not isinstance(event, dict):
        return None

    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}

    # REST API with Cognito user pools
    claims = authorizer.get("claims") or {}
    if claims.get("sub"):
        return str(claims["sub"])

    # HTTP API with JWT authorizer
    jwt_claims = (authorizer.get("jwt") or {}).get("claims") or {}
    if jwt_claims.get("sub"):
        return str(jwt_claims["sub"])

    # Lambda authorizer context
    if authorizer.get("principalId"):
        return str(authorizer["principalId"])

    return None

def require_user(f: Callable) -> Callable:
    """
    Decorator to require an authenticated user for handlers.

    The wrapped handler receives the user ID as a keyword argument.

    Args:
        f: Handler function to wrap

    Returns:
        Wrapped handler function
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], *args: Any, **kwargs: Any) -> Dict[str, Any]:
        user_id = extract_user_id(event)

        if not user_id:
            logger.warning("Request without authenticated user", extra={
                "event_keys": list(event.keys()) if isinstance(event, dict) else None
            })
            return json_response(401, {"error": "Unauthorized"})

        logger.append_keys(user_id=user_id)
        return f(event, *args, user_id=user_id, **kwargs)

    return wrapped
