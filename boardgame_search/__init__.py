from pathlib import Path

from flask import Flask, jsonify
from flask_cors import CORS
from flasgger import Flasgger

from boardgame_search.dtos.search_dtos import (
    GameSearchResultDTO,
    NameValidationResult,
    SearchRequest,
    SearchResponse,
    ValidateNameRequest,
)
from boardgame_search.repositories import dataset_candidate_paths
from boardgame_search.services.allowlist_service import AllowListService
from boardgame_search.services.cache_service import GameDataCache
from boardgame_search.services.embedding_service import EmbeddingService
from boardgame_search.services.recommendation_service import RecommendationService
from boardgame_search.utils.logging_config import configure_logging


def create_app(test_config=None, cache=None):
  app = Flask(__name__)

  CORS(app)

  app.config.from_object('boardgame_search.config.config.Config')
  if test_config:
    app.config.update(test_config)

  configure_logging(app.config["LOG_LEVEL"])

  # Generate OpenAPI schemas from Pydantic models with Swagger-friendly refs
  def _schema(model):
      return model.model_json_schema(ref_template="#/definitions/{model}")

  pydantic_schemas = {
      "SearchRequest": _schema(SearchRequest),
      "GameSearchResultDTO": _schema(GameSearchResultDTO),
      "SearchResponse": _schema(SearchResponse),
      "ValidateNameRequest": _schema(ValidateNameRequest),
      "NameValidationResult": _schema(NameValidationResult),
  }

  # Flasgger configuration
  swagger_template = {
      "swagger": "2.0",
      "info": {
          "title": "Board Game Search API",
          "description": "Lexical board game search and allow-list validation.",
          "version": "1.0.0"
      },
      "basePath": "/api",
      "schemes": [
          "http"
      ],
      "definitions": pydantic_schemas
  }

  Flasgger(app, template=swagger_template)

  if cache is None:
    cache = GameDataCache(
        dataset_candidates=dataset_candidate_paths(app.config["DATA_DIR"], app.config["DATASET_FILENAME"]),
        allowlist_path=Path(app.config["ALLOWLIST_PATH"]),
        embedding_service=EmbeddingService(),
    )

  app.extensions["game_data_cache"] = cache
  app.extensions["recommendation_service"] = RecommendationService(cache, default_top_k=app.config["DEFAULT_TOP_K"])
  app.extensions["allowlist_service"] = AllowListService(cache)

  @app.route('/')
  def index():
    return jsonify({"message": "Welcome to the Board Game Search API!"})

  from boardgame_search.routes import api_bp as routes

  app.register_blueprint(routes, url_prefix='/api')

  return app
