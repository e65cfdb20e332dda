import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from boardgame_search.dtos.search_dtos import SearchRequest, ValidateNameRequest
from boardgame_search.errors import BoardGameDataError

logger = logging.getLogger(__name__)

search_bp = Blueprint('boardgames', __name__)


def _recommendation_service():
    return current_app.extensions["recommendation_service"]


def _allowlist_service():
    return current_app.extensions["allowlist_service"]


@search_bp.route('/health', methods=['GET'])
def health_check():
    """
    Health Check
    ---
    tags:
      - Health
    responses:
      200:
        description: Service is healthy
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            message:
              type: string
              example: Board game search service is healthy
    """
    return jsonify({"status": "ok", "message": "Board game search service is healthy"})


@search_bp.route('/search', methods=['POST'])
def search_games_route():
    """
    Search board games by free-text description
    ---
    tags:
      - Search
    parameters:
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/SearchRequest'
        examples:
          default:
            value:
              query: "cooperative fantasy adventure for 4 players"
              top_k: 5
    responses:
      200:
        description: Ranked games, best match first.
        schema:
          $ref: '#/definitions/SearchResponse'
      400:
        description: Invalid request body.
      503:
        description: The game dataset could not be loaded.
    """
    try:
        req_data = SearchRequest.model_validate_json(request.data or b"{}")
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False, include_input=False)}), 400

    try:
        return jsonify(_recommendation_service().recommend_games(req_data.query, req_data.top_k))
    except BoardGameDataError as e:
        logger.error("Search failed: %s", e)
        return jsonify({"error": str(e)}), 503


@search_bp.route('/validate', methods=['POST'])
def validate_game_route():
    """
    Check whether a game name is in the allow-list
    ---
    tags:
      - Validation
    parameters:
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/ValidateNameRequest'
        examples:
          default:
            value:
              gameName: "Catan"
    responses:
      200:
        description: Existence flag plus canonical spelling when found.
        schema:
          $ref: '#/definitions/NameValidationResult'
      400:
        description: Invalid request body.
      503:
        description: The allow-list could not be loaded.
    """
    try:
        req_data = ValidateNameRequest.model_validate_json(request.data or b"{}")
    except ValidationError as e:
        return jsonify({"error": e.errors(include_url=False, include_context=False, include_input=False)}), 400

    try:
        return jsonify(_allowlist_service().check_name(req_data.gameName))
    except BoardGameDataError as e:
        logger.error("Validation failed: %s", e)
        return jsonify({"error": str(e)}), 503


@search_bp.route('/games', methods=['GET'])
def list_games_route():
    """
    List cached games with pagination
    ---
    tags:
      - Games
    parameters:
      - in: query
        name: page
        type: integer
        default: 1
      - in: query
        name: per_page
        type: integer
        default: 20
    responses:
      200:
        description: One page of games in dataset order.
      503:
        description: The game dataset could not be loaded.
    """
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 20, type=int)

    try:
        return jsonify(_recommendation_service().list_all_games(page, per_page))
    except BoardGameDataError as e:
        return jsonify({"error": str(e)}), 503


@search_bp.route('/games/<game_id>', methods=['GET'])
def get_game_route(game_id):
    """
    Get a game by its dataset id
    ---
    tags:
      - Games
    parameters:
      - in: path
        name: game_id
        type: string
        required: true
    responses:
      200:
        description: The first game with this id.
      404:
        description: No game with this id.
      503:
        description: The game dataset could not be loaded.
    """
    try:
        game = _recommendation_service().get_game_by_id(game_id)
    except BoardGameDataError as e:
        return jsonify({"error": str(e)}), 503

    if game is None:
        return jsonify({"error": f"Game '{game_id}' not found"}), 404
    return jsonify(game)
