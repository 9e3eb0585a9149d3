# ======================================
# Flask Backend – Clinic Management System
# ======================================

import logging
import os
from datetime import date, time, timedelta
from decimal import Decimal

from flask import Flask, abort, request, jsonify, send_from_directory
from flask.json.provider import DefaultJSONProvider
from flask_cors import CORS
from pymysql.constants import CR, ER
from pymysql.err import MySQLError
from sqlalchemy.exc import SQLAlchemyError, StatementError

from config import Config
from models import db
from routes import bp

# MySQL error numbers to the symbolic names clients already know (ER_DUP_ENTRY, ...)
MYSQL_ERROR_CODES = {}
for _module, _prefix in ((ER, 'ER_'), (CR, '')):
    for _name, _number in vars(_module).items():
        if _name.isupper() and isinstance(_number, int) and not _name.endswith(('FIRST', 'LAST', 'MIN_ERROR', 'MAX_ERROR')):
            MYSQL_ERROR_CODES.setdefault(_number, _prefix + _name)


class ClinicJSONProvider(DefaultJSONProvider):
    """JSON encoding for values coming straight out of the driver."""

    @staticmethod
    def default(o):
        if isinstance(o, (date, time)):
            return o.isoformat()
        if isinstance(o, timedelta):
            # MySQL TIME columns come back as timedelta
            hours, rest = divmod(int(o.total_seconds()), 3600)
            return '%02d:%02d:%02d' % (hours, rest // 60, rest % 60)
        if isinstance(o, Decimal):
            return float(o)
        return DefaultJSONProvider.default(o)


def describe_error(exc):
    """Return (code, message) for a failed statement, as the driver reports it."""
    orig = getattr(exc, 'orig', None) or exc
    if isinstance(orig, MySQLError) and orig.args:
        code = MYSQL_ERROR_CODES.get(orig.args[0])
        message = orig.args[1] if len(orig.args) > 1 else str(orig)
    else:
        code = getattr(orig, 'sqlite_errorname', None)
        message = str(orig)
    return code or 'QUERY_ERROR', message


def create_app(config=None):
    app = Flask(__name__, static_folder=None)
    app.json = ClinicJSONProvider(app)

    # ---------- Configuration ----------
    app.config.from_object(Config)
    app.config.from_mapping(config or {})
    app.logger.setLevel(app.config['LOG_LEVEL'].upper())

    # ---------- Extensions ----------
    CORS(app)
    db.init_app(app)
    app.register_blueprint(bp)

    # Ensure tables exist on startup; an unreachable database is logged, not fatal
    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError as exc:
            app.logger.error('Database connection error: %s', exc)
            app.logger.error('Please check your database credentials and ensure the database server is running')
        else:
            app.logger.info('Connected to database (%s)', db.engine.url.render_as_string(hide_password=True))

    # Debug: log all requests
    @app.before_request
    def log_request():
        app.logger.debug('Method: %s, Path: %s, Content-Type: %s', request.method, request.path, request.content_type)

    # Prevent stale caching in browser so UI updates reflect immediately
    @app.after_request
    def disable_caching(response):
        response.headers['Cache-Control'] = 'no-store'
        return response

    @app.errorhandler(StatementError)
    def handle_query_error(exc):
        code, message = describe_error(exc)
        app.logger.error('Query Error: %s: %s', code, message)
        return jsonify({'error': code, 'message': message}), 400

    # ======================================
    # Static Files
    # ======================================

    @app.route('/')
    def index():
        return send_from_directory(app.config['STATIC_ROOT'], 'index.html')

    @app.route('/<path:filename>')
    def serve_static(filename):
        # Never expose .env, .git and friends
        if any(part.startswith('.') for part in filename.split('/')):
            abort(404)
        return send_from_directory(app.config['STATIC_ROOT'], filename)

    return app


# ======================================
# Run Server
# ======================================

if __name__ == '__main__':
    logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()
    port = app.config['PORT']
    app.logger.info('Server running on http://localhost:%s', port)
    app.logger.info('Serving files from: %s', os.path.abspath(app.config['STATIC_ROOT']))
    app.run(host='0.0.0.0', port=port)
