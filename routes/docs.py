"""
API Documentation Routes
Endpoint summary, static OpenAPI document and Swagger UI page
"""

from flask import Blueprint, jsonify, send_from_directory, url_for
from config import Config

docs_bp = Blueprint('docs', __name__, static_folder='static')

OPENAPI_FILENAME = 'openapi.json'

SWAGGER_UI_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({{url: "{spec_url}", dom_id: "#swagger-ui"}});
  </script>
</body>
</html>
"""


@docs_bp.route('', methods=['GET'])
def api_docs():
    """API documentation endpoint"""
    return jsonify({
        'api_version': Config.VERSION,
        'base_url': '/api',
        'endpoints': {
            'users': {
                'GET /api/users': 'List all users',
                'POST /api/users': 'Echo a user back (not stored)'
            }
        },
        'openapi': url_for('docs.openapi_document'),
        'ui': url_for('docs.swagger_ui')
    }), 200


@docs_bp.route('/openapi.json', methods=['GET'])
def openapi_document():
    """Serve the hand-maintained OpenAPI document"""
    return send_from_directory(
        docs_bp.static_folder,
        OPENAPI_FILENAME,
        mimetype='application/json'
    )


@docs_bp.route('/ui', methods=['GET'])
def swagger_ui():
    """Interactive documentation page"""
    html = SWAGGER_UI_HTML.format(
        title=f"{Config.SERVICE_NAME} API",
        spec_url=url_for('docs.openapi_document')
    )
    return html, 200, {'Content-Type': 'text/html; charset=utf-8'}
