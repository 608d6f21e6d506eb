"""Browser front-end - a Flask app serving the board as JSON plus a page that
polls it once per second.

Usage:
    python main.py --frontend web [--host 127.0.0.1] [--port 5000]
"""

from pathlib import Path

from flask import Flask, jsonify

from .board import Board, COLOR_IMMINENT, COLOR_NORMAL, COLOR_TEXT
from .events import EventType

TEMPLATE_DIR = Path(__file__).parent


def create_app(board: Board, font_size=30.0) -> Flask:
    """Build the Flask app around an existing (already ticking) board."""
    app = Flask(__name__)

    @app.route('/')
    def index():
        html = (TEMPLATE_DIR / 'template.html').read_text()
        return (html.replace('{{FONT_SIZE}}', f'{font_size:g}')
                    .replace('{{COLOR_NORMAL}}', COLOR_NORMAL)
                    .replace('{{COLOR_IMMINENT}}', COLOR_IMMINENT)
                    .replace('{{COLOR_TEXT}}', COLOR_TEXT))

    @app.route('/api/health', methods=['GET'])
    def api_health():
        return jsonify({'status': 'ok'})

    @app.route('/api/events', methods=['GET'])
    def api_events():
        if board.timestamp is None:
            board.refresh()
        return jsonify(board.to_dict())

    @app.route('/api/events/<key>', methods=['GET'])
    def api_event(key):
        try:
            ev = EventType.from_key(key)
        except KeyError:
            return jsonify({'error': f'Unknown event: {key}'}), 404
        if board.timestamp is None:
            board.refresh()
        row = board.row(ev)
        if row is None:
            return jsonify({'error': f'Event not tracked: {key}'}), 404
        return jsonify(row.to_dict())

    return app
