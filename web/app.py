"""Simple Flask web interface for json-markup."""

import json
import logging
from pathlib import Path
from flask import Flask, Response, request, jsonify

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from json_markup.domain.errors import JSONMarkupError
from json_markup.domain.models import RenderOptions
from json_markup.engine import JSONMarkup
from json_markup.output.page_builder import PageBuilder

logger = logging.getLogger(__name__)

app = Flask(__name__)


class InvalidBody(Exception):
    """Request body is missing or not valid JSON."""
    pass


def _read_value():
    """Parse the request body as JSON.

    ``request.get_json`` returns None both for a ``null`` body and for a
    failed parse, so the body is decoded here instead.
    """
    body = request.get_data(as_text=True)
    if not body.strip():
        raise InvalidBody('No JSON body provided')
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise InvalidBody(f'Invalid JSON: {e}')


def _options() -> RenderOptions:
    """Build render options from query parameters.

    Parsed JSON never holds undefined or function values, so only the depth
    limit is exposed.
    """
    return RenderOptions(max_depth=request.args.get('max_depth', type=int))


@app.errorhandler(InvalidBody)
def handle_bad_request(e):
    logger.warning(f"Rejected request to {request.path}: {e}")
    return jsonify({'error': str(e)}), 400


@app.errorhandler(JSONMarkupError)
def handle_render_error(e):
    logger.warning(f"Render failed for {request.path}: {e}")
    return jsonify({'error': str(e)}), 422


@app.route('/api/render', methods=['POST'])
def render_fragment():
    """Render the posted JSON as a markup fragment."""
    engine = JSONMarkup(_read_value(), _options())
    return jsonify({'html': engine.to_html()})


@app.route('/api/compact', methods=['POST'])
def compact():
    engine = JSONMarkup(_read_value(), _options())
    return jsonify({'text': engine.serialize_compact()})


@app.route('/api/pretty', methods=['POST'])
def pretty():
    engine = JSONMarkup(_read_value(), _options())
    return jsonify({'text': engine.serialize_pretty()})


@app.route('/view', methods=['POST'])
def view_page():
    """Render the posted JSON as a standalone, collapsible HTML page."""
    engine = JSONMarkup(_read_value(), _options())
    page = PageBuilder().build(engine, title=request.args.get('title', 'JSON'))
    return Response(page, mimetype='text/html')


if __name__ == '__main__':
    app.run(debug=True, port=5002)
