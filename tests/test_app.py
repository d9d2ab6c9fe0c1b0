import logging

from config import Config
from middleware import logging_middleware


def test_index_lists_endpoints(client):
    response = client.get('/')

    assert response.status_code == 200
    body = response.get_json()
    assert body['service'] == Config.SERVICE_NAME
    assert body['endpoints']['users'] == '/api/users'


def test_health_check(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


def test_service_headers_on_every_response(client):
    response = client.get('/api/users')

    assert response.headers['X-Service'] == Config.SERVICE_NAME
    assert response.headers['X-Version'] == Config.VERSION


def test_unknown_path_returns_json_404(client):
    response = client.get('/api/nothing-here')

    assert response.status_code == 404
    assert response.get_json() == {
        'success': False,
        'error': 'Not Found',
        'message': 'The requested resource was not found'
    }


def test_cors_headers_on_api(client):
    response = client.get('/api/users', headers={'Origin': 'http://example.com'})

    assert response.headers['Access-Control-Allow-Origin'] in ('*', 'http://example.com')


def test_api_docs_summary(client):
    response = client.get('/api/docs')

    assert response.status_code == 200
    body = response.get_json()
    assert 'GET /api/users' in body['endpoints']['users']
    assert body['openapi'] == '/api/docs/openapi.json'


def test_openapi_document_describes_users(client):
    response = client.get('/api/docs/openapi.json')

    assert response.status_code == 200
    document = response.get_json()
    assert document['openapi'].startswith('3.')
    assert set(document['paths']['/users']) == {'get', 'post'}
    assert document['components']['schemas']['User']['required'] == ['id', 'name']
    response.close()


def test_swagger_ui_page(client):
    response = client.get('/api/docs/ui')

    assert response.status_code == 200
    assert response.content_type.startswith('text/html')
    assert b'/api/docs/openapi.json' in response.data


def test_setup_logging_does_not_stack_handlers(monkeypatch, tmp_path):
    from app import app

    monkeypatch.setattr(Config, 'LOG_FILE', str(tmp_path / 'logs' / 'app.log'))

    first = logging_middleware.setup_logging(app)
    second = logging_middleware.setup_logging(app)

    try:
        assert len(first) == len(second) == 2
        for handler in first:
            assert handler not in logging.root.handlers
        for handler in second:
            assert handler in logging.root.handlers
        assert (tmp_path / 'logs').is_dir()
    finally:
        monkeypatch.setattr(Config, 'LOG_FILE', '')
        logging_middleware.setup_logging(app)


def test_config_bind_address(monkeypatch):
    monkeypatch.setattr(Config, 'HOST', '127.0.0.1')
    monkeypatch.setattr(Config, 'PORT', 9000)

    assert Config.bind_address() == '127.0.0.1:9000'


def test_openapi_document_lives_in_routes_package():
    import os
    from routes.docs import docs_bp, OPENAPI_FILENAME

    assert os.path.dirname(docs_bp.static_folder) == docs_bp.root_path
    assert os.path.isfile(os.path.join(docs_bp.static_folder, OPENAPI_FILENAME))
