import os
import sys

# Make the project importable when the WSGI server starts elsewhere
project_home = os.path.dirname(os.path.abspath(__file__))
if project_home not in sys.path:
    sys.path.insert(0, project_home)

from app import create_app, init_db

application = create_app(os.environ.get('FLASK_ENV', 'production'))
init_db(application)
