"""
Flask application for the Texas Hold'em range equity calculator
"""

from flask import Flask, request, jsonify, Response, stream_with_context
from flask_cors import CORS
import traceback
import logging
import json
import os

# Load environment variables from .env file (optional)
try:
    from dotenv import load_dotenv
    load_dotenv()
except Exception as e:
    print(f"Warning: Could not load .env file: {e}")
    print("Environment variables should be set manually or through other means")

from poker_equity.cards import parse_cards, card_to_string
from poker_equity.ranges import (
    parse_range, preset_range, combos_from_grid, grid_from_combos, grid_cells, filter_combos, RANGE_PRESETS
)
from poker_equity.simulator import default_iterations, DEFAULT_BATCH_SIZE
from poker_equity.analysis import analyze_spot, analyze_spot_stream
from poker_equity.outs import outs_report, total_outs
from poker_equity.pot_odds import evaluate_call
from poker_equity.validation import SpotValidator

# Configure logging
logging.basicConfig(
    level=getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO),
    format='%(message)s'
)
logger = logging.getLogger(__name__)

# Disable werkzeug HTTP request logging (suppress lines like "POST /api/equity HTTP/1.1" 200)
logging.getLogger('werkzeug').setLevel(logging.WARNING)

BATCH_SIZE = int(os.getenv('EQUITY_BATCH_SIZE', str(DEFAULT_BATCH_SIZE)))
MAX_ITERATIONS = int(os.getenv('EQUITY_MAX_ITERATIONS', '100000'))

app = Flask(__name__)
CORS(app)


def combos_to_strings(combos):
    """Convert (card, card) id pairs to label pairs for the frontend"""
    return [[card_to_string(c1), card_to_string(c2)] for c1, c2 in combos]


def get_json_object():
    """
    Read the request body, which must be a JSON object.

    Raises:
        ValueError: If the body is malformed or not an object (array, string, number)
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return data


def read_cells(data):
    cells = data.get('cells')
    if not isinstance(cells, list):
        raise ValueError('cells must be a list of grid labels such as "AKs"')
    return combos_from_grid(cells)


def parse_opponent_range(data):
    """
    Read the opponent range from a request body.

    Accepts 'cells' (grid labels such as 'AKs'), 'range' (notation string)
    or 'preset' (a RANGE_PRESETS name), checked in that order.

    Returns:
        tuple: (combos, unrecognized)

    Raises:
        ValueError: If no field is present or one has the wrong type or value
    """
    if data.get('cells') is not None:
        return read_cells(data), []
    if data.get('range') is not None:
        combos, unrecognized = parse_range(data['range'])
        return combos, unrecognized
    if data.get('preset') is not None:
        combos, unrecognized = preset_range(data['preset'])
        return combos, unrecognized
    raise ValueError('Missing required field: range, cells or preset')


def parse_spot_request(data):
    """
    Parse and validate a simulation request body.

    Returns:
        dict: hole, board, combos, unrecognized, players, iterations

    Raises:
        ValueError: With a message suitable for a 400 response
    """
    if 'hole' not in data:
        raise ValueError('Missing required field: hole')
    hole = parse_cards(data['hole'])
    board = parse_cards(data.get('board') or [])
    players = data.get('players', 2)
    iterations = data.get('iterations')
    if iterations is None:
        iterations = min(default_iterations(board), MAX_ITERATIONS)

    is_valid, error_msg = SpotValidator.validate_spot(hole, board, players, iterations, MAX_ITERATIONS)
    if not is_valid:
        raise ValueError(error_msg)

    combos, unrecognized = parse_opponent_range(data)
    if not combos:
        raise ValueError('Opponent range is empty')

    return {
        'hole': hole,
        'board': board,
        'combos': combos,
        'unrecognized': unrecognized,
        'players': players,
        'iterations': iterations,
    }


@app.route('/api/range/parse', methods=['POST'])
def parse_range_route():
    """Expand range notation into combos and the grid cells it covers"""
    try:
        if not request.is_json:
            return jsonify({'error': 'Request must be JSON'}), 400

        data = get_json_object()
        if data.get('range') is not None:
            combos, unrecognized = parse_range(data['range'])
        elif data.get('preset') is not None:
            combos, unrecognized = preset_range(data['preset'])
        else:
            return jsonify({'error': 'Missing required field: range or preset'}), 400

        blockers = parse_cards(data.get('blockers') or [])
        if blockers:
            combos = filter_combos(combos, blockers)

        cells = sorted(grid_from_combos(combos), key=lambda c: (-c.hi, -c.lo, c.kind))
        return jsonify({
            'combos': combos_to_strings(combos),
            'count': len(combos),
            'unrecognized': unrecognized,
            'cells': [cell.label for cell in cells],
        }), 200

    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error parsing range: {str(e)}")
        logger.error(traceback.format_exc())
        return jsonify({'error': 'An unexpected error occurred'}), 500


@app.route('/api/range/grid', methods=['POST'])
def grid_range_route():
    """Expand a grid selection into combos"""
    try:
        if not request.is_json:
            return jsonify({'error': 'Request must be JSON'}), 400

        data = get_json_object()
        if data.get('cells') is None:
            return jsonify({'error': 'Missing required field: cells'}), 400

        combos = read_cells(data)
        return jsonify({
            'combos': combos_to_strings(combos),
            'count': len(combos),
        }), 200

    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error expanding grid: {str(e)}")
        logger.error(traceback.format_exc())
        return jsonify({'error': 'An unexpected error occurred'}), 500


@app.route('/api/range/grid', methods=['GET'])
def grid_layout_route():
    """The 169 grid cells in display order, Aces first"""
    return jsonify({'cells': [cell.to_dict() for cell in grid_cells()]}), 200


@app.route('/api/range/presets', methods=['GET'])
def presets_route():
    """Named preset ranges and their notation"""
    return jsonify({'presets': RANGE_PRESETS}), 200


@app.route('/api/equity', methods=['POST'])
def equity_route():
    """Run the Monte Carlo simulation and return the final result"""
    try:
        if not request.is_json:
            return jsonify({'error': 'Request must be JSON'}), 400

        spot = parse_spot_request(get_json_object())
        logger.info(f"🎲 [API] Equity request - hole={spot['hole']} board={spot['board']} "
                    f"players={spot['players']} iterations={spot['iterations']}")

        result = analyze_spot(spot['hole'], spot['board'], spot['combos'],
                              spot['players'], spot['iterations'])
        result['unrecognized'] = spot['unrecognized']
        return jsonify(result), 200

    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error calculating equity: {str(e)}")
        logger.error("Full traceback:")
        logger.error(traceback.format_exc())
        return jsonify({'error': f'An unexpected error occurred: {str(e)}'}), 500


@app.route('/api/equity/stream', methods=['POST'])
def equity_stream_route():
    """Run the simulation in batches, streaming progress as newline-delimited JSON"""
    try:
        if not request.is_json:
            return jsonify({'error': 'Request must be JSON'}), 400

        spot = parse_spot_request(get_json_object())
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error starting equity stream: {str(e)}")
        logger.error(traceback.format_exc())
        return jsonify({'error': 'An unexpected error occurred'}), 500

    def generate():
        try:
            for message in analyze_spot_stream(spot['hole'], spot['board'], spot['combos'],
                                               spot['players'], spot['iterations'], BATCH_SIZE):
                if message['type'] == 'result':
                    message['unrecognized'] = spot['unrecognized']
                yield json.dumps(message) + '\n'
        except Exception as e:
            logger.error(f"Error during equity stream: {str(e)}")
            logger.error(traceback.format_exc())
            yield json.dumps({'type': 'error', 'error': 'An unexpected error occurred'}) + '\n'

    return Response(stream_with_context(generate()), mimetype='application/x-ndjson')


@app.route('/api/outs', methods=['POST'])
def outs_route():
    """Count outs for the hero's hand on the current board"""
    try:
        if not request.is_json:
            return jsonify({'error': 'Request must be JSON'}), 400

        data = get_json_object()
        if 'hole' not in data:
            return jsonify({'error': 'Missing required field: hole'}), 400

        hole = parse_cards(data['hole'])
        board = parse_cards(data.get('board') or [])
        is_valid, error_msg = SpotValidator.validate_cards(hole, board)
        if not is_valid:
            return jsonify({'error': error_msg}), 400

        report = outs_report(hole, board)
        return jsonify({
            'outs': {name: count for name, count, _ in report},
            'total': total_outs({name: count for name, count, _ in report}),
            'detail': [{'name': name, 'count': count, 'percent': pct} for name, count, pct in report],
        }), 200

    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error counting outs: {str(e)}")
        logger.error(traceback.format_exc())
        return jsonify({'error': 'An unexpected error occurred'}), 500


@app.route('/api/pot-odds', methods=['POST'])
def pot_odds_route():
    """Pot odds, required equity and call EV for an equity result"""
    try:
        if not request.is_json:
            return jsonify({'error': 'Request must be JSON'}), 400

        data = get_json_object()
        for field in ('pot', 'bet', 'win', 'lose'):
            if data.get(field) is None:
                return jsonify({'error': f'Missing required field: {field}'}), 400

        summary = evaluate_call(float(data['pot']), float(data['bet']),
                                float(data['win']), float(data['lose']))
        if summary is None:
            return jsonify({'error': 'Pot and bet must be positive'}), 400
        return jsonify(summary), 200

    except (TypeError, ValueError) as e:
        return jsonify({'error': f'Invalid request: {e}'}), 400
    except Exception as e:
        logger.error(f"Error calculating pot odds: {str(e)}")
        logger.error(traceback.format_exc())
        return jsonify({'error': 'An unexpected error occurred'}), 500


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({'status': 'healthy'}), 200


if __name__ == '__main__':
    debug_mode = os.getenv('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes')
    port = int(os.getenv('PORT', '5002'))
    # Use 0.0.0.0 for production deployments (like Render) to bind to all interfaces
    host = '0.0.0.0' if os.getenv('RENDER') else '127.0.0.1'
    logger.info(f"🚀 Starting Flask app on http://{host}:{port} (debug={debug_mode})")
    app.run(host=host, port=port, debug=debug_mode)
