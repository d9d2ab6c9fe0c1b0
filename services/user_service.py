"""
User Service
User record shape, request decoding and the users dispatch table
"""

from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

USERS_PATH = '/users'

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

REQUIRED_FIELDS = ('id', 'name')

# Never mutated; list_users() hands out copies.
DEFAULT_USERS = (
    {'id': 1, 'name': 'Bob'},
)


class MalformedRequest(Exception):
    """Request body does not decode into a User record"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def make_user(user_id: int, name: str) -> Dict:
    """Build a User record"""
    return {'id': user_id, 'name': name}


def user_from_payload(payload: Any) -> Dict:
    """
    Decode a JSON payload into a User record.

    Extra keys are ignored. Raises MalformedRequest when the payload is not an
    object, a field is missing, or a field has the wrong type.
    """
    if not isinstance(payload, dict):
        raise MalformedRequest("Request body must be a JSON object")

    missing = [field for field in REQUIRED_FIELDS if field not in payload]
    if missing:
        raise MalformedRequest(f"Missing required field(s): {', '.join(missing)}")

    user_id = payload['id']
    name = payload['name']

    # bool is a subclass of int
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise MalformedRequest("Field 'id' must be an integer")

    if user_id < INT32_MIN or user_id > INT32_MAX:
        raise MalformedRequest(f"Field 'id' must be between {INT32_MIN} and {INT32_MAX}")

    if not isinstance(name, str):
        raise MalformedRequest("Field 'name' must be a string")

    return make_user(user_id, name)


def list_users() -> List[Dict]:
    """Get all users"""
    return [dict(user) for user in DEFAULT_USERS]


def create_user(payload: Any) -> Dict:
    """Decode a user and echo it back; nothing is stored"""
    user = user_from_payload(payload)
    logger.info(f"User echoed: id={user['id']}")
    return user


Response = Tuple[Any, int]
Handler = Callable[[Optional[Any]], Response]


def handle_list_users(payload: Optional[Any] = None) -> Response:
    return list_users(), 200


def handle_create_user(payload: Optional[Any] = None) -> Response:
    return create_user(payload), 200


# (method, path) -> handler(payload) -> (body, status)
ROUTES: Dict[Tuple[str, str], Handler] = {
    ('GET', USERS_PATH): handle_list_users,
    ('POST', USERS_PATH): handle_create_user,
}


def methods_for(path: str) -> List[str]:
    """Get the HTTP methods registered for a path"""
    return [method for method, route_path in ROUTES if route_path == path]


def dispatch(method: str, path: str, payload: Optional[Any] = None) -> Response:
    """Run the handler registered for (method, path)"""
    handler = ROUTES.get((method.upper(), path))
    if handler is None:
        raise KeyError(f"No handler for {method} {path}")
    return handler(payload)
