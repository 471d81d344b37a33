"""
Meal Planner Application

Builds the Flask app: database, migrations, CORS for the JSON API,
blueprints, logging and the init-db command.
"""

import logging
import os

import click
from flask import Flask, jsonify, render_template, request
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import get_config
from models import db
from routes import api, views
from services.seed import seed_sample_data

logger = logging.getLogger(__name__)

migrate = Migrate()


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(level)


def create_app(config_name=None):
    """Application factory. config_name picks a class from config.config."""
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    configure_logging(app.config['LOG_LEVEL'])

    # Create upload folder if it doesn't exist
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    db.init_app(app)
    migrate.init_app(app, db)
    CORS(app, resources={r"/api/*": {"origins": app.config['ALLOWED_ORIGINS']}}, supports_credentials=True)

    app.register_blueprint(api)
    app.register_blueprint(views)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # JSON for API clients, the default page for browsers
        if request.path.startswith('/api/'):
            return jsonify({'error': e.description}), e.code
        if e.code == 404:
            return render_template('404.html'), 404
        return e

    @app.cli.command('init-db')
    @click.option('--seed/--no-seed', default=False, help='Insert the sample recipes into an empty database.')
    def init_db_command(seed):
        """Create the database tables."""
        init_db(app, seed=seed)
        click.echo('Database initialized.')

    logger.debug("App created with %s", get_config(config_name).__name__)
    return app


def init_db(app, seed=None):
    """Create all tables and optionally seed the sample recipes."""
    if seed is None:
        seed = app.config.get('SEED_SAMPLE_DATA', False)
    with app.app_context():
        db.create_all()
        if seed:
            seed_sample_data(db.session)


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0',
            port=int(os.environ.get('PORT', 5000)), use_reloader=False)
