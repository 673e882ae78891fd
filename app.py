import logging
import os

from dotenv import load_dotenv
from flask import Flask, current_app, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf import CSRFProtect
from flask_wtf.csrf import CSRFError, generate_csrf

from passphrase import generate
from strength_check.entropy import estimate_crack_time
from strength_check.scoring import analyze

# CSRF protection
csrf = CSRFProtect()

log_handler = logging.StreamHandler()
log_handler.setLevel(logging.INFO)


def _analysis_payload(username: str, password: str):
    result = analyze(username, password)
    payload = result.to_dict()
    payload['strength_text'] = result.strength_text
    payload['entropy_text'] = result.entropy_text
    payload['crack_time'] = estimate_crack_time(result.entropy_bits)
    return payload


def _read_credentials(data):
    """Return (username, password, error) from a JSON body.

    Missing or null fields count as empty strings; any other non-string
    value is an error.
    """
    if not isinstance(data, dict):
        return None, None, 'Expected a JSON object'
    username = data.get('username')
    password = data.get('password')
    if username is None:
        username = ''
    if password is None:
        password = ''
    if not isinstance(username, str) or not isinstance(password, str):
        return None, None, 'username and password must be strings'
    return username, password, None


def ping():
    return 'OK', 200


def csrf_token():
    return jsonify({'csrf_token': generate_csrf()})


def analyze_route():
    data = request.get_json(silent=True)
    username, password, error = _read_credentials(data)
    if error:
        return jsonify({'error': error}), 400

    try:
        return jsonify(_analysis_payload(username, password))
    except Exception as e:
        current_app.logger.exception("Password analysis failed: %s", e)
        return jsonify({'error': 'Analysis failed'}), 500


def generate_route():
    username = ''
    if request.method == 'POST':
        data = request.get_json(silent=True)
        if data is not None:
            username, _, error = _read_credentials(data)
            if error:
                return jsonify({'error': error}), 400

    try:
        password = generate()
        # Re-analyse straight away so the caller can display the new score
        return jsonify({
            'password': password,
            'analysis': _analysis_payload(username, password),
        })
    except Exception as e:
        current_app.logger.exception("Password generation failed: %s", e)
        return jsonify({'error': 'Generation failed'}), 500


def create_app(test_config=None):
    app = Flask(__name__)
    load_dotenv()

    # Use environment-provided secrets; fall back to a dev key but warn
    secret_key = os.environ.get('FLASK_SECRET_KEY')
    app.secret_key = secret_key or 'dev-secret'
    app.config.update(
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SECURE=False,  # Set True on production HTTPS
        SESSION_COOKIE_SAMESITE='Lax',
        RATELIMIT_DEFAULT=os.environ.get('RATE_LIMIT', '200 per hour'),
        ANALYZE_RATE_LIMIT=os.environ.get('ANALYZE_RATE_LIMIT', '120 per minute'),
    )
    if os.environ.get('FLASK_ENV') == 'production':
        app.config['SESSION_COOKIE_SECURE'] = True
    if test_config:
        app.config.update(test_config)

    # Configure logging; every app instance shares the 'app' logger
    if log_handler not in app.logger.handlers:
        app.logger.addHandler(log_handler)
    app.logger.setLevel(logging.INFO)

    if not secret_key:
        app.logger.warning('FLASK_SECRET_KEY not set: using the development secret key.')

    csrf.init_app(app)

    # Rate limiter (Flask-Limiter v3+), one per app
    limiter = Limiter(
        get_remote_address,
        app=app,
        default_limits=[app.config['RATELIMIT_DEFAULT']],
    )

    app.add_url_rule('/ping', 'ping', ping)
    app.add_url_rule('/api/csrf-token', 'csrf_token', csrf_token)
    app.add_url_rule(
        '/api/analyze',
        'analyze',
        limiter.limit(app.config['ANALYZE_RATE_LIMIT'])(analyze_route),
        methods=['POST'],
    )
    app.add_url_rule('/api/generate', 'generate', generate_route, methods=['GET', 'POST'])

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({'error': 'Too many requests', 'limit': str(e.description)}), 429

    @app.errorhandler(CSRFError)
    def csrf_failed(e):
        return jsonify({'error': e.description}), 400

    @app.after_request
    def set_security_headers(response):
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'no-referrer'
        response.headers['Permissions-Policy'] = 'geolocation=()'
        response.headers['Content-Security-Policy'] = "default-src 'self'"
        # Passwords travel in request and response bodies
        response.headers['Cache-Control'] = 'no-store'
        return response

    return app


if __name__ == "__main__":
    app = create_app()
    app.logger.info("Starting StrengthMeter server (development mode)...")
    try:
        app.run(host="127.0.0.1", port=int(os.environ.get('PORT', 5000)))
    except Exception as e:
        app.logger.exception("Error starting server: %s", e)
