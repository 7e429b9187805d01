from app.config import settings


def _create(client, title, description="d"):
    r = client.post('/api/tutorials/create', json={'title': title, 'description': description})
    assert r.status_code == 201
    return r.json()


def test_create_update_delete_flow(client):
    r = client.post('/api/tutorials/create', json={'title': 'A', 'description': 'd'})
    assert r.status_code == 201
    assert r.json() == {'id': 1, 'title': 'A', 'description': 'd', 'published': False}

    r = client.put('/api/tutorials/update/1', json={'title': 'B', 'description': 'd2', 'published': True})
    assert r.status_code == 200
    assert r.json() == {'id': 1, 'title': 'B', 'description': 'd2', 'published': True}

    r = client.delete('/api/tutorials/delete/1')
    assert r.status_code == 204
    assert r.content == b''

    r = client.get('/api/tutorials/1')
    assert r.status_code == 404


def test_create_ignores_published_flag(client):
    r = client.post('/api/tutorials/create', json={'title': 'A', 'description': 'd', 'published': True})
    assert r.status_code == 201
    assert r.json()['published'] is False
    r = client.get(f"/api/tutorials/{r.json()['id']}")
    assert r.json()['published'] is False


def test_get_returns_what_was_created(client):
    created = _create(client, 'Tutorial One', 'intro')
    r = client.get(f"/api/tutorials/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_get_unknown_id_is_404(client):
    assert client.get('/api/tutorials/999').status_code == 404


def test_list_without_title_returns_everything(client):
    _create(client, 'Tutorial One')
    _create(client, 'Other')
    r = client.get('/api/tutorials/all')
    assert r.status_code == 200
    assert [t['title'] for t in r.json()] == ['Tutorial One', 'Other']
    r = client.get('/api/tutorials/all', params={'title': ''})
    assert len(r.json()) == 2


def test_list_filters_by_title_ignoring_case(client):
    _create(client, 'Tutorial One')
    _create(client, 'Spring Boot')
    r = client.get('/api/tutorials/all', params={'title': 'tu'})
    assert r.status_code == 200
    assert [t['title'] for t in r.json()] == ['Tutorial One']


def test_list_on_empty_table_is_empty_200(client):
    r = client.get('/api/tutorials/all', params={'title': 'x'})
    assert r.status_code == 200
    assert r.json() == []


def test_published_lists_only_published(client):
    a = _create(client, 'A')
    _create(client, 'B')
    client.put(f"/api/tutorials/update/{a['id']}", json={'title': 'A', 'description': 'd', 'published': True})
    r = client.get('/api/tutorials/published')
    assert r.status_code == 200
    assert [t['id'] for t in r.json()] == [a['id']]


def test_published_empty_is_204(client):
    _create(client, 'A')
    r = client.get('/api/tutorials/published')
    assert r.status_code == 204
    assert r.content == b''


def test_update_unknown_id_is_404(client):
    r = client.put('/api/tutorials/update/42', json={'title': 'B', 'description': 'd2', 'published': True})
    assert r.status_code == 404


def test_delete_unknown_id_is_204(client):
    assert client.delete('/api/tutorials/delete/42').status_code == 204


def test_delete_all(client):
    _create(client, 'A')
    _create(client, 'B')
    r = client.delete('/api/tutorials/delete/all')
    assert r.status_code == 204
    assert client.get('/api/tutorials/all').json() == []


def test_repository_failure_is_bare_500(client, monkeypatch):
    def boom(*_args, **_kwargs):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr("app.repositories.TutorialRepository.find_by_title_containing", boom)
    monkeypatch.setattr("app.repositories.TutorialRepository.save", boom)
    monkeypatch.setattr("app.repositories.TutorialRepository.delete_all", boom)

    r = client.get('/api/tutorials/all')
    assert r.status_code == 500
    assert r.content == b''
    assert client.post('/api/tutorials/create', json={'title': 'A'}).status_code == 500
    assert client.delete('/api/tutorials/delete/all').status_code == 500


def test_cors_allows_configured_origin_only(client):
    r = client.get('/api/tutorials/all', headers={'Origin': settings.CORS_ORIGIN})
    assert r.headers.get('access-control-allow-origin') == settings.CORS_ORIGIN
    r = client.get('/api/tutorials/all', headers={'Origin': 'http://evil.example'})
    assert 'access-control-allow-origin' not in r.headers


def test_health_and_request_id(client):
    r = client.get('/health', headers={'X-Request-ID': 'abc123'})
    assert r.status_code == 200
    assert r.json() == {'status': 'ok'}
    assert r.headers['X-Request-ID'] == 'abc123'
    assert client.get('/health').headers['X-Request-ID']
