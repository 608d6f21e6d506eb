"""Tests for d4events.web — Flask routes via the test client."""
import pytest

from d4events.board import Board
from d4events.events import EventType
from d4events.web import create_app

TS = EventType.RW.epoch + 3600 + 600 + 8


@pytest.fixture
def board():
    b = Board()
    b.refresh(TS)
    return b


@pytest.fixture
def client(board):
    app = create_app(board, font_size=24)
    app.config['TESTING'] = True
    return app.test_client()


def test_health(client):
    r = client.get('/api/health')
    assert r.status_code == 200
    assert r.get_json() == {'status': 'ok'}


def test_events(client):
    data = client.get('/api/events').get_json()
    assert data['timestamp'] == TS
    assert [e['label'] for e in data['events']] == [
        'World Boss', 'Legion Event', 'Realm Walker']
    assert data['events'][2]['text'] == "  0:04:52  "


def test_single_event(client):
    r = client.get('/api/events/RW')
    assert r.status_code == 200
    assert r.get_json()['delta'] == 292


def test_unknown_event(client):
    r = client.get('/api/events/helltide')
    assert r.status_code == 404
    assert 'error' in r.get_json()


def test_untracked_event():
    b = Board(events=(EventType.WB,))
    b.refresh(TS)
    client = create_app(b).test_client()
    assert client.get('/api/events/le').status_code == 404


def test_refreshes_cold_board():
    b = Board()
    client = create_app(b).test_client()
    data = client.get('/api/events').get_json()
    assert data['timestamp'] is not None
    assert len(data['events']) == 3


def test_index_page(client):
    r = client.get('/')
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert '<title>Diablo 4 Events</title>' in body
    assert 'font-size: 24pt' in body
    assert '{{' not in body
