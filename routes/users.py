"""
Users Routes
Flask adapter over the users dispatch table
"""

from flask import Blueprint, request, jsonify
from werkzeug.exceptions import BadRequest
from services.user_service import USERS_PATH, MalformedRequest, dispatch, methods_for
import logging

logger = logging.getLogger(__name__)

users_bp = Blueprint('users', __name__)


def read_json_body():
    """Decode the request body, raising MalformedRequest if it is not JSON"""
    if not request.is_json:
        raise MalformedRequest("Content-Type must be application/json")

    try:
        return request.get_json()
    except BadRequest:
        raise MalformedRequest("Request body is not valid JSON")


@users_bp.route('', methods=methods_for(USERS_PATH))
@users_bp.route('/', methods=methods_for(USERS_PATH))
def users_collection():
    """
    GET  -> list all users
    POST -> echo the submitted user back, nothing is stored

    Errors:
        400 when a POST body does not decode into {id: int, name: str}
    """
    method = 'GET' if request.method == 'HEAD' else request.method
    payload = read_json_body() if method == 'POST' else None

    body, status = dispatch(method, USERS_PATH, payload)
    return jsonify(body), status
