from flask import Flask
from boardgame_search import create_app

if __name__ == "__main__":
    app: Flask = create_app()

    app.run(
        host='0.0.0.0',
        port=app.config["FLASK_RUN_PORT"],
        debug=app.config["FLASK_DEBUG"]
    )
