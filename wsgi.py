# wsgi.py
# Entry point for `flask --app wsgi run` and WSGI servers (gunicorn wsgi:app).
from main import create_app

app = create_app()
