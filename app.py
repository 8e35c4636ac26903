"""
DocScan development server.

    python app.py            # FLASK_ENV selects the config, PORT the port
"""
import os

from docscan import create_app

app = create_app(os.getenv('FLASK_ENV', 'default'))


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'], debug=app.config.get('DEBUG', False))
