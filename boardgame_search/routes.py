from flask import Blueprint
from boardgame_search.controllers.search_controller import search_bp

api_bp = Blueprint('api', __name__)

api_bp.register_blueprint(search_bp, url_prefix='/boardgames')
